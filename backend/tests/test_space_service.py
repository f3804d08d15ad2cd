import pytest
from app.models.property import SpaceType
from app.models.search import SpaceSearchCriteria
from app.modules.spaces.service import SpaceService


@pytest.fixture
def space_service(seeded_session):
    """SpaceService over the sample data"""
    return SpaceService(seeded_session)


def sizes(result):
    return [item.size for item in result.items]


class TestSearchSpaces:
    """Test filtering and ordering of the space search"""

    @pytest.mark.asyncio
    async def test_all_spaces_largest_first(self, space_service):
        result = await space_service.search_spaces(SpaceSearchCriteria(limit=100))
        assert result.total == 8
        assert sizes(result) == [300.0, 200.0, 180.0, 150.0, 120.0, 100.0, 60.0, 50.0]

    @pytest.mark.asyncio
    async def test_property_filter(self, space_service):
        result = await space_service.search_spaces(SpaceSearchCriteria(property_id=5))
        assert result.total == 3
        assert sizes(result) == [180.0, 120.0, 50.0]
        assert all(item.property_id == 5 for item in result.items)

    @pytest.mark.asyncio
    async def test_type_filter(self, space_service):
        result = await space_service.search_spaces(SpaceSearchCriteria(type=SpaceType.BEDROOM))
        assert result.total == 3
        assert sizes(result) == [200.0, 180.0, 150.0]

    @pytest.mark.asyncio
    async def test_min_size_is_inclusive(self, space_service):
        result = await space_service.search_spaces(SpaceSearchCriteria(min_size=150))
        assert result.total == 4
        assert sizes(result) == [300.0, 200.0, 180.0, 150.0]

    @pytest.mark.asyncio
    async def test_combined_filters(self, space_service):
        result = await space_service.search_spaces(
            SpaceSearchCriteria(property_id=1, type="kitchen", min_size=50)
        )
        assert result.total == 1
        item = result.items[0]
        assert item.property_id == 1
        assert item.type == SpaceType.KITCHEN
        assert item.size == 100.0

    @pytest.mark.asyncio
    async def test_property_without_spaces(self, space_service):
        result = await space_service.search_spaces(SpaceSearchCriteria(property_id=4))
        assert result.total == 0
        assert result.items == []

    @pytest.mark.asyncio
    async def test_pagination(self, space_service):
        first = await space_service.search_spaces(SpaceSearchCriteria(page=1, limit=3))
        second = await space_service.search_spaces(SpaceSearchCriteria(page=2, limit=3))
        third = await space_service.search_spaces(SpaceSearchCriteria(page=3, limit=3))

        assert first.total == second.total == third.total == 8
        assert sizes(first) + sizes(second) + sizes(third) == [
            300.0, 200.0, 180.0, 150.0, 120.0, 100.0, 60.0, 50.0
        ]
        assert len(third.items) == 2

    @pytest.mark.asyncio
    async def test_empty_database(self, test_db_session):
        result = await SpaceService(test_db_session).search_spaces(SpaceSearchCriteria())
        assert result.total == 0
        assert result.items == []
