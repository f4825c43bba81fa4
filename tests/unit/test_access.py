import pytest

from haulerplans.billing import access
from haulerplans.billing.access import (
    UPGRADE_REASON,
    FeatureAccess,
    Usage,
    can_access_feature,
    can_add_service_area,
    can_request_job,
    get_upgrade_suggestion,
)
from haulerplans.billing.plans import Limit, TierFeatures
from haulerplans.exceptions import FeatureUnavailableError, UnknownFeatureError, UnknownTierError
from haulerplans.types import SubscriptionTier, TierFeature


@pytest.mark.unit
class TestCanAccessFeature:
    def test_granted_flag(self) -> None:
        result = can_access_feature("pro", TierFeature.HAS_AD_FREE_EXPERIENCE)
        assert result == FeatureAccess(can_access=True)
        assert result.reason is None

    def test_reports_lowest_qualifying_tier(self) -> None:
        result = can_access_feature("free", "has_ad_free_experience")
        assert result.can_access is False
        assert result.reason == "This feature requires the PRO plan."
        assert result.required_tier is SubscriptionTier.PRO

    def test_premier_only_flag(self) -> None:
        result = can_access_feature("free", TierFeature.HAS_ADVANCED_ANALYTICS)
        assert result.reason == "This feature requires the PREMIER plan."
        assert result.required_tier is SubscriptionTier.PREMIER

    def test_pro_lacking_premier_flag(self) -> None:
        result = can_access_feature(SubscriptionTier.PRO, TierFeature.HAS_DEDICATED_ACCOUNT_MANAGER)
        assert result.can_access is False
        assert result.required_tier is SubscriptionTier.PREMIER

    def test_premier_has_everything(self) -> None:
        for feature in TierFeature:
            assert can_access_feature("premier", feature).can_access is True

    def test_unknown_feature(self) -> None:
        with pytest.raises(UnknownFeatureError, match="Unknown tier feature"):
            can_access_feature("free", "has_jetpack")

    def test_unknown_tier(self) -> None:
        with pytest.raises(UnknownTierError):
            can_access_feature("gold", TierFeature.HAS_PREMIUM_SUPPORT)

    def test_flag_no_tier_grants_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        nothing = TierFeatures(max_service_areas=Limit.finite(1), max_job_requests=Limit.finite(1))
        monkeypatch.setattr(access, "get_tier_features", lambda tier: nothing)
        with pytest.raises(FeatureUnavailableError, match="has_premium_support"):
            can_access_feature("free", TierFeature.HAS_PREMIUM_SUPPORT)


@pytest.mark.unit
class TestServiceAreaGate:
    def test_free_allows_first_area(self) -> None:
        assert can_add_service_area("free", 0).can_access is True

    def test_free_denies_at_limit(self) -> None:
        result = can_add_service_area("free", 1)
        assert result.can_access is False
        assert result.reason == (
            "You have reached the maximum number of service areas (1) "
            "for your FREE plan. Upgrade to add more."
        )
        assert result.required_tier is SubscriptionTier.PRO

    def test_pro_boundary(self) -> None:
        assert can_add_service_area("pro", 4).can_access is True
        assert can_add_service_area("pro", 5).can_access is False

    def test_required_tier_skips_insufficient_tiers(self) -> None:
        assert can_add_service_area("free", 7).required_tier is SubscriptionTier.PREMIER

    def test_premier_unlimited(self) -> None:
        assert can_add_service_area("premier", 1_000_000).can_access is True


@pytest.mark.unit
class TestJobRequestGate:
    def test_pro_boundary_is_exclusive(self) -> None:
        assert can_request_job("pro", 49).can_access is True
        denied = can_request_job("pro", 50)
        assert denied.can_access is False
        assert "(50)" in denied.reason
        assert "PRO plan" in denied.reason
        assert denied.reason.endswith("Upgrade to request more jobs.")
        assert denied.required_tier is SubscriptionTier.PREMIER

    def test_free_limit(self) -> None:
        assert can_request_job("free", 4).can_access is True
        assert can_request_job("free", 5).can_access is False

    def test_premier_unlimited(self) -> None:
        assert can_request_job(SubscriptionTier.PREMIER, 10**6).can_access is True


@pytest.mark.unit
class TestUpgradeSuggestion:
    def test_free_at_service_area_limit(self) -> None:
        result = get_upgrade_suggestion("free", Usage(service_areas=1, job_requests=0))
        assert result.should_upgrade is True
        assert result.suggested_tier is SubscriptionTier.PRO
        assert result.reason == UPGRADE_REASON

    def test_premier_never_upgrades(self) -> None:
        result = get_upgrade_suggestion("premier", Usage(service_areas=999, job_requests=999))
        assert result.should_upgrade is False
        assert result.suggested_tier is None

    def test_threshold_is_inclusive(self) -> None:
        # 4 of 5 job requests is exactly 80%
        assert get_upgrade_suggestion("free", Usage(job_requests=4)).should_upgrade is True
        assert get_upgrade_suggestion("free", Usage(job_requests=3)).should_upgrade is False

    def test_pro_suggests_premier(self) -> None:
        result = get_upgrade_suggestion("pro", Usage(service_areas=1, job_requests=40))
        assert result.should_upgrade is True
        assert result.suggested_tier is SubscriptionTier.PREMIER

    def test_pro_below_threshold(self) -> None:
        result = get_upgrade_suggestion("pro", Usage(service_areas=3, job_requests=39))
        assert result.should_upgrade is False

    def test_custom_threshold(self) -> None:
        usage = Usage(job_requests=25)
        assert get_upgrade_suggestion("pro", usage).should_upgrade is False
        assert get_upgrade_suggestion("pro", usage, threshold=0.5).should_upgrade is True

    def test_empty_usage(self) -> None:
        assert get_upgrade_suggestion("free", Usage()).should_upgrade is False
