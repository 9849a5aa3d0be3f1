"""Tests for GSTR-3B composition."""

from decimal import Decimal

from taxengine.domain.services.gstr3b_service import compose_gstr3b, net_tax_payable

PERIOD = {"month": 1, "year": 2025}


def _purchase(igst="0", cgst="0", sgst="0"):
    return {
        "invoice_no": "P-1",
        "supplier_gstin": "29AADCB2230M1ZP",
        "total_amount": Decimal("10000"),
        "igst_amount": Decimal(igst),
        "cgst_amount": Decimal(cgst),
        "sgst_amount": Decimal(sgst),
    }


class TestGSTR3B:
    def test_outward_totals(self, b2b_invoice, b2c_small_invoice):
        doc = compose_gstr3b(PERIOD, [b2b_invoice, b2c_small_invoice], [])
        assert doc.ret_period == "012025"
        assert doc.sec_sum.ttl_val == Decimal("16000.00")
        assert doc.sec_sum.ttl_cgst == Decimal("1350.00")
        assert doc.sec_sum.ttl_sgst == Decimal("1350.00")
        assert doc.sec_sum.ttl_igst == Decimal("180.00")
        assert doc.sec_sum.ttl_cess == Decimal("0.00")

    def test_itc_from_purchases(self):
        purchases = [_purchase(igst="1800"), _purchase(cgst="450.25", sgst="450.25")]
        doc = compose_gstr3b(PERIOD, [], purchases)
        assert len(doc.itc_elg.itc_avl) == 1
        itc = doc.itc_elg.itc_avl[0]
        assert itc.ty == "OTH"
        assert "IMPG" not in {e.ty for e in doc.itc_elg.itc_avl}
        assert itc.iamt == Decimal("1800.00")
        assert itc.camt == Decimal("450.25")
        assert doc.itc_elg.itc_net.samt == Decimal("450.25")
        assert doc.itc_elg.itc_rev == ()

    def test_empty_period(self):
        doc = compose_gstr3b(PERIOD, [], [], gstin="27AAPFU0939F1ZV")
        payload = doc.to_payload()
        assert payload["gstin"] == "27AAPFU0939F1ZV"
        assert payload["sec_sum"] == {
            "ttl_val": 0.0, "ttl_igst": 0.0, "ttl_cgst": 0.0, "ttl_sgst": 0.0, "ttl_cess": 0.0,
        }
        assert payload["itc_elg"]["itc_avl"] == [
            {"iamt": 0.0, "camt": 0.0, "samt": 0.0, "csamt": 0.0, "ty": "OTH"},
        ]
        assert payload["intr_ltfee"] == {
            "intr_details": {"iamt": 0.0, "camt": 0.0, "samt": 0.0, "csamt": 0.0},
        }

    def test_no_invoice_detail_in_payload(self, b2b_invoice):
        payload = compose_gstr3b(PERIOD, [b2b_invoice], []).to_payload()
        assert set(payload) == {"gstin", "ret_period", "sec_sum", "itc_elg", "intr_ltfee"}


def test_net_tax_payable(b2b_invoice, b2c_small_invoice):
    doc = compose_gstr3b(PERIOD, [b2b_invoice, b2c_small_invoice], [_purchase(igst="500", cgst="2000")])
    payable = net_tax_payable(doc)
    assert payable["igst"] == Decimal("0")
    assert payable["cgst"] == Decimal("0")
    assert payable["sgst"] == Decimal("1350.00")
    assert payable["total"] == Decimal("1350.00")
