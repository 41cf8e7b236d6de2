"""
ROI Report: plain-text document.

Same figures as the quote email, laid out as a longer report:
1. Executive Summary
2. Financial Breakdown (+ Payback Analysis when an ADR is set)
3. Operational Advantages
4. Risk Mitigation
5. Recommendations
6. Next Steps
7. Contact Information

The marketing copy blocks are fixed text; only the figures and the contact
footer change between reports.
"""

import re
from datetime import date
from typing import Optional

from .config import settings
from .formatting import money0, money2, multiple, nights, pct
from .schemas import ContactInfo, PricingConstants, QuoteInput, QuoteResult

RULE = "━" * 68

# Bookable nights per month used for the monthly payback estimate (~70% occupancy)
NIGHTS_PER_MONTH = 21

RISK_MITIGATION = [
    "- Proven refinishing process with quality guarantees",
    "- Minimal operational disruption",
    "- Faster project completion vs. full replacement",
    "- Professional liability coverage included",
]

NEXT_STEPS = [
    "- Schedule site assessment and detailed proposal",
    "- Review specific property requirements",
    "- Finalize project timeline and logistics",
    "- Execute service agreement and schedule start date",
]


def _section(title: str) -> list:
    return ["", title, RULE, ""]


def _generated_on(today: date) -> str:
    """M/D/YYYY, no zero padding"""
    return f"{today.month}/{today.day}/{today.year}"


def report_filename(company: str) -> str:
    return f"Candy-Restoration-ROI-Report-{re.sub(r'[^a-zA-Z0-9]', '-', company)}.txt"


def compose_report(
    result: QuoteResult,
    contact: ContactInfo,
    pricing: PricingConstants,
    quote_input: QuoteInput,
    generated_on: Optional[date] = None,
) -> str:
    """
    Render the ROI report text.

    Args:
        result: computed quote
        contact: prospect details for the footer
        pricing: price list (deposit percentage)
        quote_input: source of the baseline and ADR echoes
        generated_on: report date; today when omitted

    Returns:
        The report as a single newline-joined string.
    """
    generated_on = generated_on or date.today()
    deposit_pct = f"{pricing.deposit_pct:g}"

    # The report opens with a blank line ahead of the title
    lines = [
        "",
        f"{settings.COMPANY_NAME.upper()} - ROI ANALYSIS REPORT",
        f"Generated: {_generated_on(generated_on)}",
    ]

    lines += _section("EXECUTIVE SUMMARY")
    lines += [
        f"Service Type: {result.service_label}",
        f"Project Scope: {result.scope_text}",
        f"Total Investment: {money0(result.quote_total)}",
        f"Total Savings vs. Replacement: {money0(result.savings)} ({pct(result.savings_pct)})",
        f"ROI Multiple: {multiple(result.roi_multiple)}",
    ]

    lines += _section("FINANCIAL BREAKDOWN")
    lines += [
        f"REFINISHING COSTS ({settings.COMPANY_NAME.upper()}):",
        f"- Unit Price: {money0(result.unit_price)} {result.unit_label}",
        f"- Total Service Cost: {money0(result.quote_total)}",
        f"- Deposit ({deposit_pct}%): {money2(result.deposit)}",
        f"- Final Payment: {money2(result.remainder)}",
        "",
        "REPLACEMENT BASELINE COMPARISON:",
        f"- Casegoods Replacement Cost: {money0(quote_input.casegoods_replacement_per_room)} per room",
        f"- Tub Replacement Cost: {money0(quote_input.tub_replacement_per_tub)} per tub",
        f"- Total Replacement Cost: {money0(result.replacement_baseline)}",
        f"- Cost Savings: {money0(result.savings)}",
        f"- Percentage Saved: {pct(result.savings_pct)}",
    ]

    if result.payback_nights is not None:
        monthly = result.payback_nights / NIGHTS_PER_MONTH
        lines += [
            "",
            "PAYBACK ANALYSIS:",
            f"- Average Daily Rate (ADR): {money2(quote_input.average_daily_rate)}",
            f"- Nights to Break Even: {nights(result.payback_nights)} nights per unit",
            f"- Monthly Payback (assuming 70% occupancy): {nights(monthly)} months",
        ]

    lines += _section("OPERATIONAL ADVANTAGES")
    lines += [
        "✓ ZERO ROOM DOWNTIME",
        "  • In-room refinishing process",
        "  • Rooms remain revenue-generating during service",
        "  • No displacement of guests",
        "",
        "✓ NO FREIGHT OR HAUL-AWAY COSTS",
        "  • Eliminates furniture delivery logistics",
        "  • Reduces disposal fees and environmental impact",
        "  • Streamlined project management",
        "",
        "✓ IMMEDIATE CASH FLOW BENEFITS",
        f"  • {pct(result.savings_pct)} cost reduction vs. replacement",
        f"  • {multiple(result.roi_multiple)} return on investment",
        "  • Preserve capital for other strategic initiatives",
    ]

    lines += _section("RISK MITIGATION")
    lines += RISK_MITIGATION

    lines += _section("RECOMMENDATIONS")
    lines += [
        "Based on this analysis, refinishing presents a compelling alternative to",
        "replacement that delivers:",
        "",
        f"1. Substantial cost savings ({money0(result.savings)})",
        "2. Zero operational downtime",
        "3. Improved cash flow and ROI",
        "4. Reduced environmental impact",
        "5. Enhanced guest experience continuity",
    ]

    lines += _section("NEXT STEPS")
    lines += NEXT_STEPS

    lines += _section("CONTACT INFORMATION")
    lines += [
        settings.COMPANY_NAME,
        f"Email: {settings.SALES_EMAIL}",
        f"Calendar: {settings.BOOK_LINK}",
        "",
        "This analysis is valid for 30 days from generation date.",
        "Terms and conditions may apply based on site-specific requirements.",
        "",
        f"Generated for: {contact.company}",
        f"Contact: {contact.name} ({contact.email})",
    ]

    return "\n".join(lines) + "\n"
