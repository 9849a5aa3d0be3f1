"""Shared test fixtures for the tax engine test suite."""

from datetime import date
from decimal import Decimal

import pytest


@pytest.fixture
def supplier() -> dict:
    """The issuing business: a Maharashtra-registered trader."""
    return {
        "name": "ABC Traders Pvt Ltd",
        "gstin": "27AAPFU0939F1ZV",
        "address": "12 MG Road",
        "city": "Pune",
        "pincode": "411001",
        "state": "Maharashtra",
        "pan": "AAPFU0939F",
    }


@pytest.fixture
def deductor() -> dict:
    return {
        "name": "ABC Traders Pvt Ltd",
        "address": "12 MG Road",
        "city": "Pune",
        "state": "Maharashtra",
        "pincode": "411001",
        "pan": "AAPFU0939F",
        "tan": "PNEA12345B",
        "responsible_person_name": "R. Sharma",
        "responsible_person_designation": "Director",
    }


@pytest.fixture
def b2b_invoice() -> dict:
    """Intra-state invoice to a registered Maharashtra buyer, two lines."""
    return {
        "invoice_no": "INV-001",
        "invoice_date": date(2025, 11, 5),
        "customer_gstin": "27AADCB2230M1ZP",
        "customer_name": "XYZ Enterprises",
        "customer_address": "4 Marine Drive",
        "customer_city": "Mumbai",
        "customer_pincode": "400002",
        "customer_state": "Maharashtra",
        "place_of_supply": "Maharashtra",
        "total_amount": Decimal("15000"),
        "cgst_amount": Decimal("1350"),
        "sgst_amount": Decimal("1350"),
        "igst_amount": Decimal("0"),
        "total_gst": Decimal("2700"),
        "grand_total": Decimal("17700"),
        "items": [
            {
                "name": "Laptop bag",
                "description": "Padded bag",
                "hsn_code": "4202",
                "quantity": 10,
                "unit": "NOS",
                "gst_rate": 18,
                "taxable_amount": Decimal("10000"),
                "cgst_rate": 9,
                "sgst_rate": 9,
                "cgst_amount": Decimal("900"),
                "sgst_amount": Decimal("900"),
            },
            {
                "name": "Mouse",
                "description": "Wireless mouse",
                "hsn_code": "8471",
                "quantity": 5,
                "unit": "NOS",
                "gst_rate": 18,
                "taxable_amount": Decimal("5000"),
                "cgst_rate": 9,
                "sgst_rate": 9,
                "cgst_amount": Decimal("450"),
                "sgst_amount": Decimal("450"),
            },
        ],
    }


@pytest.fixture
def b2c_small_invoice() -> dict:
    """Unregistered buyer in Karnataka, below the B2CL limit."""
    return {
        "invoice_no": "INV-002",
        "invoice_date": date(2025, 11, 12),
        "customer_name": "Walk-in customer",
        "place_of_supply": "Karnataka",
        "total_amount": Decimal("1000"),
        "igst_amount": Decimal("180"),
        "total_gst": Decimal("180"),
        "grand_total": Decimal("1180"),
        "items": [
            {
                "name": "Keyboard",
                "hsn_code": "8471",
                "gst_rate": 18,
                "taxable_amount": Decimal("1000"),
                "igst_rate": 18,
                "igst_amount": Decimal("180"),
            },
        ],
    }


@pytest.fixture
def b2c_large_invoice() -> dict:
    """Unregistered buyer in Karnataka, above the B2CL limit."""
    return {
        "invoice_no": "INV-003",
        "invoice_date": date(2025, 11, 20),
        "customer_name": "Retail buyer",
        "customer_gstin": "",
        "place_of_supply": "Karnataka",
        "total_amount": Decimal("300000"),
        "igst_amount": Decimal("54000"),
        "total_gst": Decimal("54000"),
        "grand_total": Decimal("354000"),
        "items": [
            {
                "name": "Server",
                "hsn_code": "8471",
                "gst_rate": 18,
                "taxable_amount": Decimal("300000"),
                "igst_rate": 18,
                "igst_amount": Decimal("54000"),
            },
        ],
    }


@pytest.fixture
def tds_payments() -> list[dict]:
    """Q2 FY 2024-25 vendor payments plus one out-of-quarter payment."""
    return [
        {
            "vendor_pan": "BBBBB2222B",
            "vendor_name": "Beta Contractors",
            "tds_section": "194C",
            "amount": Decimal("50000"),
            "tds_amount": Decimal("500"),
            "tds_rate": Decimal("1.0"),
            "payment_date": date(2024, 7, 10),
            "challan_no": "00001",
            "challan_date": date(2024, 8, 7),
            "bsr_code": "0510001",
        },
        {
            "vendor_pan": "AAAAA1111A",
            "vendor_name": "Alpha Consultants",
            "tds_section": "194J",
            "amount": Decimal("60000"),
            "tds_amount": Decimal("6000"),
            "tds_rate": Decimal("10.0"),
            "payment_date": date(2024, 8, 15),
            "challan_no": "00002",
            "challan_date": date(2024, 9, 7),
            "bsr_code": "0510001",
        },
        {
            "vendor_pan": "BBBBB2222B",
            "vendor_name": "Beta Contractors",
            "tds_section": "194C",
            "amount": Decimal("45000.50"),
            "tds_amount": Decimal("450.01"),
            "tds_rate": Decimal("1.0"),
            "payment_date": date(2024, 9, 2),
            "challan_no": "00002",
            "challan_date": date(2024, 9, 7),
            "bsr_code": "0510001",
        },
        {
            "vendor_pan": None,
            "vendor_name": "Unknown Vendor",
            "tds_section": "194C",
            "amount": Decimal("40000"),
            "tds_amount": Decimal("8000"),
            "tds_rate": Decimal("20.0"),
            "payment_date": date(2024, 9, 20),
        },
        {
            "vendor_pan": "AAAAA1111A",
            "vendor_name": "Alpha Consultants",
            "tds_section": "194J",
            "amount": Decimal("90000"),
            "tds_amount": Decimal("9000"),
            "tds_rate": Decimal("10.0"),
            "payment_date": date(2024, 11, 3),
            "challan_no": "00003",
        },
    ]
