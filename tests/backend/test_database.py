from sqlalchemy import inspect

from backend import database


def test_ensure_clinic_schema_keeps_a_single_full_name_index(clinic_db, monkeypatch) -> None:
    engine = clinic_db.get_bind()
    monkeypatch.setattr(database, 'engine', engine)
    monkeypatch.setattr(database, '_clinic_schema_checked', False)

    database.ensure_clinic_schema()

    full_name_indexes = [
        index['name']
        for index in inspect(engine).get_indexes('patients')
        if index['column_names'] == ['full_name']
    ]
    assert len(full_name_indexes) == 1


def test_ensure_clinic_schema_adds_appointment_indexes(clinic_db, monkeypatch) -> None:
    engine = clinic_db.get_bind()
    monkeypatch.setattr(database, 'engine', engine)
    monkeypatch.setattr(database, '_clinic_schema_checked', False)

    database.ensure_clinic_schema()

    index_names = {index['name'] for index in inspect(engine).get_indexes('appointments')}
    assert {'idx_appointments_scheduled_at', 'idx_appointments_status_scheduled'} <= index_names
