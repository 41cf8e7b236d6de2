"""
Quote API tests.

Tests:
1-3.  /calculate (defaults, normalization, payback null)
4-5.  /validate-contact
6-8.  /email (blocked on contact errors, draft + mailto)
9-11. /eml, /report, /report/pdf downloads
12.   /book booking link
13.   /health
"""

from urllib.parse import parse_qs, urlsplit


def _body(contact_payload, **quote):
    return {"quote": quote, "contact": contact_payload}


# ============================================================
# 1-3. Calculate
# ============================================================

def test_calculate_defaults_to_bundle(client):
    resp = client.post("/api/quote/calculate", json={})
    assert resp.status_code == 200
    data = resp.json()
    assert data["service"] == "bundle"
    assert data["quote_total"] == 37500
    assert data["replacement_baseline"] == 1168000
    assert data["payback_nights"] is None


def test_calculate_normalizes_inputs(client):
    resp = client.post("/api/quote/calculate", json={
        "service": "tubs", "tub_count": "0", "tub_replacement_per_tub": "abc",
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["quantity"] == 1
    assert data["replacement_baseline"] == 0
    assert data["savings_pct"] == 0


def test_calculate_payback(client):
    resp = client.post("/api/quote/calculate", json={
        "service": "bundle", "room_count": 50, "average_daily_rate": "150",
    })
    assert resp.json()["payback_nights"] == 2.5


def test_calculate_rejects_unknown_service(client):
    resp = client.post("/api/quote/calculate", json={"service": "carpets"})
    assert resp.status_code == 422


# ============================================================
# 4-5. Contact check
# ============================================================

def test_validate_contact_reports_first_error(client):
    resp = client.post("/api/quote/validate-contact", json={})
    assert resp.status_code == 200
    assert resp.json() == {"ok": False, "error": "Name is required", "field": "name"}


def test_validate_contact_ok(client, contact_payload):
    resp = client.post("/api/quote/validate-contact", json=contact_payload)
    assert resp.json()["ok"] is True


# ============================================================
# 6-8. Email
# ============================================================

def test_email_blocked_on_free_domain(client, contact_payload):
    contact_payload["email"] = "traveler@gmail.com"
    resp = client.post("/api/quote/email", json=_body(contact_payload))
    assert resp.status_code == 422
    assert resp.json()["detail"] == {
        "error": "Please enter a business email (no free email domains)",
        "field": "email",
    }


def test_email_blocked_reports_name_first(client):
    resp = client.post("/api/quote/email", json={"contact": {}})
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "Name is required"


def test_email_draft(client, contact_payload):
    resp = client.post("/api/quote/email", json=_body(contact_payload, service="furniture", room_count=100))
    assert resp.status_code == 200
    data = resp.json()
    assert data["subject"] == "Quote — Furniture (Casegoods) Only — 100 room(s) — Harbor View Hotel"
    assert "Service Total: $12,500" in data["body"]
    assert data["mailto"].startswith("mailto:ops%40hiltonportfolio.com?")
    assert parse_qs(urlsplit(data["mailto"]).query)["body"] == [data["body"]]
    assert data["eml_filename"] == "Candy-Restoration-Quote.eml"


# ============================================================
# 9-11. Downloads
# ============================================================

def test_eml_download(client, contact_payload):
    resp = client.post("/api/quote/eml", json=_body(contact_payload, service="tubs"))
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("message/rfc822")
    assert 'filename="Candy-Restoration-Quote.eml"' in resp.headers["content-disposition"]
    text = resp.content.decode("utf-8")
    assert text.startswith("To: ops@hiltonportfolio.com\r\nSubject: Quote — Tubs Only — 100 tub(s)")
    assert "Content-Transfer-Encoding: 8bit\r\n\r\nHi Dana Reyes,\r\n" in text


def test_report_download(client, contact_payload):
    resp = client.post("/api/quote/report", json=_body(contact_payload, average_daily_rate=150))
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "Candy-Restoration-ROI-Report-Harbor-View-Hotel.txt" in resp.headers["content-disposition"]
    assert "PAYBACK ANALYSIS:" in resp.text


def test_report_pdf_download(client, contact_payload):
    resp = client.post("/api/quote/report/pdf", json=_body(contact_payload))
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert "Candy-Restoration-ROI-Report-Harbor-View-Hotel.pdf" in resp.headers["content-disposition"]
    assert resp.content[:5] == b"%PDF-"


def test_report_blocked_without_company(client, contact_payload):
    contact_payload["company"] = ""
    resp = client.post("/api/quote/report", json=_body(contact_payload))
    assert resp.status_code == 422
    assert resp.json()["detail"]["field"] == "company"


# ============================================================
# 12. Booking
# ============================================================

def test_book_call_prefills_booking_link(client, contact_payload):
    resp = client.post("/api/quote/book", json=_body(contact_payload, service="tubs", tub_count=40))
    assert resp.status_code == 200
    data = resp.json()
    url = urlsplit(data["booking_url"])
    assert f"{url.scheme}://{url.netloc}{url.path}" == "https://calendly.com/adam-candyrestoration/15min"
    params = parse_qs(url.query)
    assert params["name"] == ["Dana Reyes"]
    assert params["a1"] == ["Tubs Only"]
    assert params["a2"] == ["40"]
    assert params["a3"] == ["5551234567"]
    assert params["phone_formatted"] == ["(555) 123-4567"]
    assert data["report_filename"] == "Candy-Restoration-ROI-Report-Harbor-View-Hotel.txt"


# ============================================================
# 13. Health
# ============================================================

def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
