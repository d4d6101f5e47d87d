from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_annotate_returns_view() -> None:
    payload = {
        "answer": "- Apply before March\n- Eligible: yes",
        "sources": ["https://a.gov.in", {"url": "https://b.org", "title": "B"}],
        "profile_text": "Age: 24",
    }
    response = client.post("/answer/annotate", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["markdown"] == "- Apply before March [1](#src-1)\n- Eligible: yes [2](#src-2)"
    assert data["profile"] == {"age": "24"}
    assert [s["source_type"] for s in data["sources"]] == ["Gov portal", "Reference"]
    assert data["uncertain"] is False


def test_annotate_tolerates_malformed_sources() -> None:
    response = client.post("/answer/annotate", json={"answer": "text", "sources": {"bad": 1}})
    assert response.status_code == 200
    assert response.json()["sources"] == []


def test_annotate_rejects_unknown_tab() -> None:
    response = client.post("/answer/annotate", json={"answer": "text", "active_tab": "faq"})
    assert response.status_code == 422


def test_annotate_rejects_long_answer() -> None:
    response = client.post("/answer/annotate", json={"answer": "x" * 20001})
    assert response.status_code == 422


def test_profile_endpoint() -> None:
    response = client.post("/answer/profile", json={"text": "Category: OBC, income: 2 lakh"})
    assert response.status_code == 200
    data = response.json()
    assert data["profile"] == {"category": "OBC", "income": "2 lakh"}
    assert data["missing"] == ["state", "age"]
