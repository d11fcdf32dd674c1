import pytest

from app.core.config import Settings
from app.services.supabase_manager import QueryResult


class FakeSupabase:
    """Substitui o SupabaseManager, registrando as consultas feitas."""

    def __init__(self, result: QueryResult):
        self.result = result
        self.calls = []

    def select(self, table, filters=None, order_by=None, ascending=True):
        self.calls.append({
            "table": table,
            "filters": filters,
            "order_by": order_by,
            "ascending": ascending,
        })
        return self.result


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        settings = Settings()
        settings.supabase_url = "https://exemplo.supabase.co"
        settings.supabase_anon_key = "anon"
        settings.locations_table = "locations"
        settings.mirror_upstream_status = False
        settings.strict_id_parsing = False
        for key, value in overrides.items():
            setattr(settings, key, value)
        return settings
    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def fake_supabase():
    def _make(result: QueryResult = None) -> FakeSupabase:
        return FakeSupabase(result if result is not None else QueryResult())
    return _make
