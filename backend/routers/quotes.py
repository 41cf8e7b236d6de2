"""
Quote API - calculator and outbound documents.

POST /api/quote/calculate         - QuoteInput -> QuoteResult
POST /api/quote/validate-contact  - first failing contact rule, if any
POST /api/quote/email             - subject/body + mailto link
POST /api/quote/eml               - download the quote email as .eml
POST /api/quote/report            - download the ROI report (.txt)
POST /api/quote/report/pdf        - download the ROI report (.pdf)
POST /api/quote/book              - booking link + email draft

Every outbound endpoint checks the contact form first and either produces
its document in full or returns the single current error.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..booking import build_booking_url
from ..config import settings
from ..email_composer import build_eml, build_mailto, compose_email
from ..pricing_engine import compute_quote
from ..report_generator import compose_report, report_filename
from ..report_pdf import generate_report_pdf
from ..schemas import (
    DEFAULT_PRICING,
    BookingResponse,
    ContactCheckResponse,
    ContactInfo,
    EmailResponse,
    QuoteDocumentRequest,
    QuoteInput,
    QuoteResult,
)
from ..validation import validate_contact

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quote", tags=["quote"])


def _require_valid_contact(contact: ContactInfo) -> None:
    """Raise 422 with the first failing contact rule."""
    issue = validate_contact(contact)
    if issue:
        logger.warning("Document generation blocked: %s (%s)", issue.message, issue.field)
        raise HTTPException(
            status_code=422,
            detail={"error": issue.message, "field": issue.field},
        )


def _attachment(content, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/calculate", response_model=QuoteResult)
def calculate(quote_input: QuoteInput):
    return compute_quote(quote_input, DEFAULT_PRICING)


@router.post("/validate-contact", response_model=ContactCheckResponse)
def check_contact(contact: ContactInfo):
    issue = validate_contact(contact)
    if issue:
        return ContactCheckResponse(ok=False, error=issue.message, field=issue.field)
    return ContactCheckResponse(ok=True)


@router.post("/email", response_model=EmailResponse)
def email_quote(request: QuoteDocumentRequest):
    _require_valid_contact(request.contact)
    result = compute_quote(request.quote, DEFAULT_PRICING)
    draft = compose_email(result, request.contact, DEFAULT_PRICING, request.quote)
    logger.info("Quote email composed for %s (%s)", request.contact.company, result.scope_text)
    return EmailResponse(
        subject=draft.subject,
        body=draft.body,
        mailto=build_mailto(request.contact.email, draft.subject, draft.body, settings.SALES_CC or None),
        eml_filename=settings.EML_FILENAME,
    )


@router.post("/eml")
def download_eml(request: QuoteDocumentRequest):
    _require_valid_contact(request.contact)
    result = compute_quote(request.quote, DEFAULT_PRICING)
    draft = compose_email(result, request.contact, DEFAULT_PRICING, request.quote)
    eml = build_eml(request.contact.email, draft.subject, draft.body, settings.SALES_CC or None)
    logger.info("Quote .eml generated for %s", request.contact.company)
    return _attachment(eml.encode("utf-8"), "message/rfc822", settings.EML_FILENAME)


@router.post("/report")
def download_report(request: QuoteDocumentRequest):
    _require_valid_contact(request.contact)
    result = compute_quote(request.quote, DEFAULT_PRICING)
    text = compose_report(result, request.contact, DEFAULT_PRICING, request.quote)
    filename = report_filename(request.contact.company)
    logger.info("ROI report generated: %s", filename)
    return _attachment(text.encode("utf-8"), "text/plain; charset=utf-8", filename)


@router.post("/report/pdf")
def download_report_pdf(request: QuoteDocumentRequest):
    _require_valid_contact(request.contact)
    result = compute_quote(request.quote, DEFAULT_PRICING)
    text = compose_report(result, request.contact, DEFAULT_PRICING, request.quote)
    pdf_bytes = generate_report_pdf(text, settings.COMPANY_NAME)
    filename = report_filename(request.contact.company)[:-len(".txt")] + ".pdf"
    logger.info("ROI report PDF generated: %s", filename)
    return _attachment(pdf_bytes, "application/pdf", filename)


@router.post("/book", response_model=BookingResponse)
def book_call(request: QuoteDocumentRequest):
    """
    Everything the "Book a Call + Get ROI Report" action needs: the booking
    link pre-filled with the contact, plus the email draft and report name.
    """
    _require_valid_contact(request.contact)
    result = compute_quote(request.quote, DEFAULT_PRICING)
    draft = compose_email(result, request.contact, DEFAULT_PRICING, request.quote)
    logger.info("Booking link built for %s", request.contact.company)
    return BookingResponse(
        booking_url=build_booking_url(request.contact, request.quote, result),
        subject=draft.subject,
        body=draft.body,
        mailto=build_mailto(request.contact.email, draft.subject, draft.body, settings.SALES_CC or None),
        report_filename=report_filename(request.contact.company),
    )
