"""GST / TDS computation and statutory-return engine."""

from taxengine.domain.models.records import (
    DeductorDetails,
    InvoiceLine,
    PartyDetails,
    PurchaseInvoice,
    SalaryTdsRecord,
    SalesInvoice,
    TdsPayment,
    TransportDetails,
)
from taxengine.domain.models.results import (
    CollectionResult,
    ErrorKind,
    GstinValidation,
    InvalidRateError,
    PanValidation,
    TaxEngineError,
    TaxSplit,
    WithholdingResult,
)
from taxengine.domain.models.returns import (
    EWayBill,
    Form24QReturn,
    Form26QReturn,
    Gstr1Return,
    Gstr3bReturn,
    ReturnDocument,
    ReturnKind,
    TdsCertificate,
)
from taxengine.domain.models.tax_tables import (
    PayeeCategory,
    Quarter,
    TaxSlab,
    TcsSection,
    TdsSection,
)
from taxengine.domain.services.ewaybill_service import compose_eway_bill
from taxengine.domain.services.gst_calculator import compute_gst
from taxengine.domain.services.gstin_pan_validation import validate_gstin, validate_pan
from taxengine.domain.services.gstr1_service import compose_gstr1
from taxengine.domain.services.gstr3b_service import compose_gstr3b
from taxengine.domain.services.jurisdiction import is_interstate, resolve_state_code
from taxengine.domain.services.return_composer import compose_return
from taxengine.domain.services.tax_periods import assessment_year_for
from taxengine.domain.services.tds_certificate import compose_tds_certificate
from taxengine.domain.services.tds_returns import compose_form24q, compose_form26q
from taxengine.domain.services.withholding import (
    compute_tcs,
    compute_tds,
    describe_tds_section,
    get_tds_rate_card,
)

__all__ = [
    "CollectionResult",
    "DeductorDetails",
    "EWayBill",
    "ErrorKind",
    "Form24QReturn",
    "Form26QReturn",
    "GstinValidation",
    "Gstr1Return",
    "Gstr3bReturn",
    "InvalidRateError",
    "InvoiceLine",
    "PanValidation",
    "PartyDetails",
    "PayeeCategory",
    "PurchaseInvoice",
    "Quarter",
    "ReturnDocument",
    "ReturnKind",
    "SalaryTdsRecord",
    "SalesInvoice",
    "TaxEngineError",
    "TaxSlab",
    "TaxSplit",
    "TcsSection",
    "TdsCertificate",
    "TdsPayment",
    "TdsSection",
    "TransportDetails",
    "WithholdingResult",
    "assessment_year_for",
    "compose_eway_bill",
    "compose_form24q",
    "compose_form26q",
    "compose_gstr1",
    "compose_gstr3b",
    "compose_return",
    "compose_tds_certificate",
    "compute_gst",
    "compute_tcs",
    "compute_tds",
    "describe_tds_section",
    "get_tds_rate_card",
    "is_interstate",
    "resolve_state_code",
    "validate_gstin",
    "validate_pan",
]
