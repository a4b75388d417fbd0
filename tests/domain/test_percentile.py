from bunt.domain.percentile import PercentileProfile


def _profile(**stats: int) -> PercentileProfile:
    return PercentileProfile(player_id=1, year=2024, name="Test Player", **stats)


class TestRolePredicates:
    def test_oaa_only_is_fielder_only(self) -> None:
        profile = _profile(oaa=75)

        assert profile.is_fielder
        assert not profile.is_hitter
        assert not profile.is_runner
        assert not profile.is_pitcher

    def test_arm_strength_makes_fielder(self) -> None:
        assert _profile(arm_strength=40).is_fielder

    def test_hitter_needs_xwoba(self) -> None:
        assert not _profile(xba=90, xslg=90).is_hitter
        assert _profile(xwoba=10).is_hitter

    def test_runner_and_pitcher(self) -> None:
        assert _profile(sprint_speed=99).is_runner
        assert _profile(xera=50).is_pitcher

    def test_two_way_player(self) -> None:
        profile = _profile(xwoba=100, xera=85, sprint_speed=70)

        assert profile.is_hitter and profile.is_pitcher and profile.is_runner
        assert not profile.is_fielder

    def test_zero_percentile_still_counts(self) -> None:
        assert _profile(xwoba=0).is_hitter
