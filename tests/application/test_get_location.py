from app.application.common.locations.usecases.get_location import get_location_usecase
from app.services.supabase_manager import QueryResult


def test_missing_id_does_not_query(settings, fake_supabase):
    db = fake_supabase(QueryResult(data=[{"id": 1, "name": "Matriz"}]))
    lookup = get_location_usecase("", db, settings)
    assert lookup.body == {"status": 400, "error": "Bad Request"}
    assert lookup.status_code == 200
    assert db.calls == []


def test_found_body_has_no_error(settings, fake_supabase):
    db = fake_supabase(QueryResult(data=[{"id": 1, "name": "Matriz"}]))
    lookup = get_location_usecase("1", db, settings)
    assert lookup.body == {"data": {"id": 1, "name": "Matriz"}, "status": 200}
    assert "error" not in lookup.body


def test_error_body_has_no_data(settings, fake_supabase):
    db = fake_supabase(QueryResult(error={"message": "falhou", "code": "XX000"}, status=500))
    lookup = get_location_usecase("1", db, settings)
    assert lookup.body == {"status": 500, "error": {"message": "falhou", "code": "XX000"}}
    assert lookup.status_code == 200


def test_custom_table_name(make_settings, fake_supabase):
    db = fake_supabase(QueryResult())
    get_location_usecase("3", db, make_settings(locations_table="places"))
    assert db.calls[0]["table"] == "places"


def test_mirror_ignores_invalid_status(make_settings, fake_supabase):
    db = fake_supabase(QueryResult(error={"message": "?"}, status=0))
    lookup = get_location_usecase("3", db, make_settings(mirror_upstream_status=True))
    assert lookup.status_code == 200


def test_strict_parsing_accepts_numeric_prefix(make_settings, fake_supabase):
    db = fake_supabase(QueryResult(data=[]))
    lookup = get_location_usecase("3x", db, make_settings(strict_id_parsing=True))
    assert db.calls[0]["filters"] == {"id": 3}
    assert lookup.body == {"status": 200}
