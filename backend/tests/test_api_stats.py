import pytest
from app.db.models import Property as DBProperty, Space as DBSpace


class TestStatsAPI:
    """Test cases for the space statistics endpoint"""

    def test_space_stats_empty(self, client):
        response = client.get("/stats/spaces")

        assert response.status_code == 200
        assert response.json() == {"overall": None, "perProperty": []}

    def test_space_stats_single_property(self, client, test_db_session):
        db_property = DBProperty(address="123 Main St", type="house", price=100000)
        db_property.spaces.append(DBSpace(type="bedroom", size=200))
        db_property.spaces.append(DBSpace(type="kitchen", size=100))
        test_db_session.add(db_property)
        test_db_session.commit()

        response = client.get("/stats/spaces")

        assert response.status_code == 200
        assert response.json() == {
            "overall": 150.0,
            "perProperty": [
                {"property_id": db_property.id, "address": "123 Main St", "avg_size": 150.0}
            ],
        }

    def test_space_stats_seeded(self, client, seeded_session):
        result = client.get("/stats/spaces").json()

        assert result["overall"] == pytest.approx(145.0)
        assert [row["property_id"] for row in result["perProperty"]] == [3, 1, 5, 2]


class TestServiceEndpoints:
    """Test root and health endpoints"""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Property Search API"}

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "services": {"database": "healthy"},
        }
