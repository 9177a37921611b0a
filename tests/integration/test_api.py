"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient
from drug_name_matcher.engine_instance import catalog_store
from drug_name_matcher.main import app


class TestAPI:
    """Integration tests for API endpoints."""

    @pytest.fixture
    def client(self):
        """Create a test client with the packaged sample catalog loaded."""
        with TestClient(app) as client:
            catalog_store.load_file()
            yield client

    def test_root_endpoint(self, client):
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Drug Name Matcher"
        assert data["version"] == "1.0.0"
        assert data["status"] == "running"
        assert data["catalog_size"] == 15

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert "timestamp" in response.json()

    def test_readiness(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"
        assert response.json()["catalog_size"] == 15

    def test_search_drugs(self, client):
        """Test the batch search response shape and ranking."""
        response = client.post("/api/search-drugs", json={
            "drug_names": ["타이레놀", "게보린", "zzzzqqq"],
            "intent": "drug_info",
            "question_summary": "타이레놀이랑 게보린 같이 먹어도 되나요?",
        })
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["intent"] == "drug_info"
        assert data["originalQuery"] == "타이레놀이랑 게보린 같이 먹어도 되나요?"
        assert data["drugCount"] == 3

        tylenol = data["searchResults"][0]
        assert tylenol["inputDrugName"] == "타이레놀"
        assert tylenol["found"] is True
        assert tylenol["matchCount"] == len(tylenol["matches"])
        assert tylenol["matchCount"] <= 3
        assert tylenol["bestMatch"]["약품명"] == "타이레놀정500mg"
        assert tylenol["matches"][0]["성분명"] == "아세트아미노펜"
        assert tylenol["matches"][0]["유사도점수"] >= 50

        geborin = data["searchResults"][1]
        assert geborin["bestMatch"]["유사도점수"] == 100
        assert geborin["matches"][0]["제품명"] == "게보린정"
        assert geborin["matches"][0]["성분명_A"] == "이소프로필안티피린"

        missing = data["searchResults"][2]
        assert missing["found"] is False
        assert missing["matches"] == []
        assert missing["bestMatch"] is None

        assert data["summary"] == {
            "totalSearched": 3,
            "totalFound": 2,
            "notFound": ["zzzzqqq"],
        }

    def test_search_drugs_with_parameters(self, client):
        response = client.post("/api/search-drugs", json={
            "drug_names": ["아스피린"],
            "algorithm": "levenshtein",
            "threshold": 0,
            "limit": 5,
        })
        assert response.status_code == 200

        matches = response.json()["searchResults"][0]["matches"]
        assert len(matches) == 5
        scores = [match["유사도점수"] for match in matches]
        assert scores == sorted(scores, reverse=True)
        assert matches[0]["약품명"] == "아스피린"

    def test_search_drugs_string_metadata(self, client):
        response = client.post("/api/search-drugs", json={"drug_names": ["판콜에이"]})
        assert response.status_code == 200

        best = response.json()["searchResults"][0]["bestMatch"]
        assert best["약품명"] == "판콜에이내복액"
        assert best["metadata"]["제품명"] == "판콜에이내복액"

    def test_search_drugs_unknown_algorithm(self, client):
        response = client.post("/api/search-drugs", json={
            "drug_names": ["게보린"],
            "algorithm": "soundex",
        })
        assert response.status_code == 200
        assert response.json()["searchResults"][0]["found"] is True

    def test_search_drugs_empty_list(self, client):
        response = client.post("/api/search-drugs", json={"drug_names": []})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_search_drugs_name_too_long(self, client):
        response = client.post("/api/search-drugs", json={"drug_names": ["게보린", "타" * 101]})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_search_drugs_blank_names(self, client):
        response = client.post("/api/search-drugs", json={"drug_names": ["", "  "]})
        assert response.status_code == 200

        data = response.json()
        assert all(result["found"] is False for result in data["searchResults"])
        assert data["summary"]["notFound"] == ["", "  "]

    def test_search_drugs_missing_names(self, client):
        response = client.post("/api/search-drugs", json={"intent": "x"})
        assert response.status_code == 400

    def test_search_drugs_threshold_out_of_range(self, client):
        response = client.post("/api/search-drugs", json={"drug_names": ["게보린"], "threshold": 101})
        assert response.status_code == 400

    def test_search_drugs_empty_catalog(self, client):
        catalog_store.clear()
        try:
            response = client.post("/api/search-drugs", json={"drug_names": ["게보린"]})
            assert response.status_code == 503
            assert response.json()["success"] is False
            assert response.json()["error"] == "Catalog Unavailable"

            assert client.get("/health/ready").status_code == 503
        finally:
            catalog_store.load_file()

    def test_search_single_drug(self, client):
        response = client.get("/api/search-drug/게보린")
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["inputDrugName"] == "게보린"
        assert data["found"] is True
        assert data["results"][0]["content"] == "게보린"
        assert data["results"][0]["score"] == 100

    def test_search_single_drug_with_limit(self, client):
        response = client.get("/api/search-drug/타이레놀?limit=1&threshold=50")
        assert response.status_code == 200

        results = response.json()["results"]
        assert len(results) == 1
        assert results[0]["matchedName"] == "타이레놀정500mg"

    def test_search_single_drug_not_found(self, client):
        response = client.get("/api/search-drug/zzzzqqq")
        assert response.status_code == 200
        assert response.json()["found"] is False
        assert response.json()["results"] == []

    def test_search_single_drug_invalid_limit(self, client):
        response = client.get("/api/search-drug/게보린?limit=0")
        assert response.status_code == 400
