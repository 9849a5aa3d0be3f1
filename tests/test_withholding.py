"""Tests for TDS / TCS computation."""

from decimal import Decimal

import pytest

from taxengine.domain.models.results import ErrorKind
from taxengine.domain.models.tax_tables import TDS_SECTIONS, PayeeCategory, TdsSection
from taxengine.domain.services.withholding import (
    compute_tcs,
    compute_tds,
    describe_tds_section,
    get_tds_rate_card,
)


# ---------------------------------------------------------------------------
# TDS
# ---------------------------------------------------------------------------


class TestComputeTds:
    def test_contractor_company(self):
        result = compute_tds(50000, "194C", True, "company")
        assert result.is_applicable is True
        assert result.threshold == Decimal("30000")
        assert result.rate == Decimal("1.0")
        assert result.amount == Decimal("500.00")
        assert result.net_amount == Decimal("49500.00")
        assert result.section == "194C"
        assert result.error is None

    def test_contractor_individual_below_threshold(self):
        result = compute_tds(25000, "194C", True, "individual")
        assert result.is_applicable is False
        assert result.threshold == Decimal("100000")
        assert result.amount == Decimal("0")
        assert result.rate == Decimal("0")
        assert result.net_amount == Decimal("25000.00")
        assert result.reason == "Payment amount 25000 is below threshold 100000"
        assert result.failed is False

    def test_individual_category_is_case_insensitive(self):
        assert compute_tds(50000, "194C", True, " Individual ").is_applicable is False
        assert compute_tds(50000, TdsSection.S194C, True, PayeeCategory.INDIVIDUAL).is_applicable is False

    def test_individual_threshold_only_for_194c(self):
        result = compute_tds(35000, "194J", True, "individual")
        assert result.threshold == Decimal("30000")
        assert result.is_applicable is True

    @pytest.mark.parametrize("section", list(TdsSection))
    def test_threshold_is_inclusive(self, section):
        threshold = TDS_SECTIONS[section].threshold
        assert compute_tds(threshold, section, True).is_applicable is True
        assert compute_tds(threshold - Decimal("0.01"), section, True).is_applicable is False

    def test_without_pan_uses_higher_rate(self):
        result = compute_tds(50000, "194J", False)
        assert result.rate == Decimal("20.0")
        assert result.amount == Decimal("10000.00")

    def test_flat_rate_sections_ignore_pan(self):
        assert compute_tds(600000, "194O", False).rate == Decimal("1.0")
        assert compute_tds(6000000, "194Q", False).rate == Decimal("0.1")

    def test_plant_and_machinery_rent(self):
        result = compute_tds(300000, "194I", True, plant_and_machinery=True)
        assert result.rate == Decimal("2.0")
        assert result.amount == Decimal("6000.00")
        assert compute_tds(300000, "194I", False, plant_and_machinery=True).rate == Decimal("20.0")
        assert compute_tds(300000, "194I", True).rate == Decimal("10.0")

    def test_amount_rounded_half_up(self):
        # 30000.50 * 1% = 300.005
        result = compute_tds("30000.50", "194C", True)
        assert result.amount == Decimal("300.01")
        assert result.net_amount == Decimal("29700.49")

    @pytest.mark.parametrize(
        "amount,section,has_pan",
        [
            (Decimal("40000"), "194A", True),
            (Decimal("123456.78"), "194H", False),
            (Decimal("987654.32"), "194I", True),
            (Decimal("10000.01"), "194S", True),
        ],
    )
    def test_net_plus_withheld_equals_amount(self, amount, section, has_pan):
        result = compute_tds(amount, section, has_pan)
        assert result.is_applicable
        assert result.net_amount + result.amount == amount

    def test_unknown_section(self):
        result = compute_tds(50000, "194Z", True)
        assert result.is_applicable is False
        assert result.error is ErrorKind.UNKNOWN_SECTION
        assert result.threshold == Decimal("0")
        assert result.net_amount is None
        assert result.message == "Invalid TDS section: 194Z"
        assert result.failed is True

    def test_to_dict(self):
        data = compute_tds(50000, "194C", True).to_dict()
        assert data["amount"] == 500.0
        assert data["error"] is None


class TestRateCard:
    def test_lists_every_section(self):
        card = get_tds_rate_card()
        assert [entry["section"] for entry in card] == [s.value for s in TdsSection]

    def test_extra_fields(self):
        card = {entry["section"]: entry for entry in get_tds_rate_card()}
        assert card["194C"]["threshold_individual"] == 100000.0
        assert card["194I"]["plant_machinery_rate"] == 2.0
        assert "threshold_individual" not in card["194J"]

    def test_describe(self):
        assert describe_tds_section("194J") == "Professional/technical services"
        assert describe_tds_section("999") == "Unknown section"


# ---------------------------------------------------------------------------
# TCS
# ---------------------------------------------------------------------------


class TestComputeTcs:
    def test_sale_of_goods(self):
        result = compute_tcs(6000000, "206C_1H")
        assert result.is_applicable is True
        assert result.amount == Decimal("6000.00")
        assert result.total_receivable == Decimal("6006000.00")

    def test_below_threshold(self):
        result = compute_tcs(100000, "206CG")
        assert result.is_applicable is False
        assert result.threshold == Decimal("250000")
        assert result.amount == Decimal("0")
        assert result.total_receivable == Decimal("100000.00")
        assert result.reason.startswith("Sale amount 100000")

    def test_threshold_inclusive(self):
        result = compute_tcs(250000, "206CG")
        assert result.is_applicable is True
        assert result.amount == Decimal("5000.00")

    def test_unknown_section(self):
        result = compute_tcs(1000, "194C")
        assert result.error is ErrorKind.UNKNOWN_SECTION
        assert result.total_receivable is None
