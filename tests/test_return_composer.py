"""Tests for the return-kind dispatcher and the package surface."""

from datetime import date

import pytest

import taxengine
from taxengine.domain.models.returns import (
    EWayBill,
    Form24QReturn,
    Form26QReturn,
    Gstr1Return,
    Gstr3bReturn,
    ReturnKind,
    TdsCertificate,
)
from taxengine.domain.services.return_composer import COMPOSERS, compose_return


def test_every_kind_has_a_composer():
    assert set(COMPOSERS) == set(ReturnKind)


def test_document_kinds():
    assert Gstr1Return.kind is ReturnKind.GSTR1
    assert Gstr3bReturn.kind is ReturnKind.GSTR3B
    assert Form26QReturn.kind is ReturnKind.FORM_26Q
    assert Form24QReturn.kind is ReturnKind.FORM_24Q
    assert EWayBill.kind is ReturnKind.EWAY_BILL
    assert TdsCertificate.kind is ReturnKind.TDS_CERTIFICATE


class TestDispatch:
    def test_gstr1(self, b2b_invoice):
        doc = compose_return("GSTR1", period=(11, 2025), invoices=[b2b_invoice])
        assert isinstance(doc, Gstr1Return)

    def test_gstr3b(self, b2b_invoice):
        doc = compose_return(ReturnKind.GSTR3B, period=(11, 2025), sales=[b2b_invoice], purchases=[])
        assert isinstance(doc, Gstr3bReturn)

    def test_26q(self, tds_payments):
        doc = compose_return("26Q", quarter="Q2", financial_year="2024-25", payments=tds_payments)
        assert isinstance(doc, Form26QReturn)
        assert doc.kind is ReturnKind.FORM_26Q

    def test_24q(self):
        doc = compose_return("24Q", quarter="Q1", financial_year="2024-25", employees=[])
        assert isinstance(doc, Form24QReturn)

    def test_eway_bill(self, b2b_invoice, supplier):
        doc = compose_return("EWB", invoice=b2b_invoice, supplier=supplier)
        assert isinstance(doc, EWayBill)

    def test_certificate(self, tds_payments, deductor):
        doc = compose_return(
            "16A",
            payment=tds_payments[0],
            deductor=deductor,
            reference_factory=lambda: "UTN",
            issued_on=date(2024, 10, 1),
        )
        assert isinstance(doc, TdsCertificate)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown return kind"):
            compose_return("GSTR9")


def test_public_api_exports():
    for name in taxengine.__all__:
        assert hasattr(taxengine, name), name
    assert taxengine.compute_gst(100000, 18, "Maharashtra", "Karnataka").igst == 18000
