from threading import Lock

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker

from backend.core import config


engine = create_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

_schema_lock = Lock()
_clinic_schema_checked = False

# table -> [(column, DDL)] for columns added after the table first shipped.
CLINIC_MIGRATION_STEPS = {
    'patients': [
        ('document_number', 'ALTER TABLE patients ADD COLUMN document_number VARCHAR'),
        ('notes', 'ALTER TABLE patients ADD COLUMN notes VARCHAR'),
    ],
    'appointments': [
        ('consultation_type', 'ALTER TABLE appointments ADD COLUMN consultation_type VARCHAR'),
        ('notes', 'ALTER TABLE appointments ADD COLUMN notes VARCHAR'),
    ],
    'payment_methods': [
        ('description', 'ALTER TABLE payment_methods ADD COLUMN description VARCHAR'),
    ],
}

CLINIC_INDEXES = {
    'appointments': [
        'CREATE INDEX IF NOT EXISTS idx_appointments_scheduled_at ON appointments(scheduled_at)',
        'CREATE INDEX IF NOT EXISTS idx_appointments_status_scheduled ON appointments(status, scheduled_at)',
    ],
}


def ensure_clinic_schema() -> None:
    global _clinic_schema_checked

    if _clinic_schema_checked:
        return

    with _schema_lock:
        if _clinic_schema_checked:
            return

        inspector = inspect(engine)
        table_names = set(inspector.get_table_names())

        with engine.begin() as connection:
            for table_name, migration_steps in CLINIC_MIGRATION_STEPS.items():
                if table_name not in table_names:
                    continue

                existing_columns = {column['name'] for column in inspector.get_columns(table_name)}
                for column_name, statement in migration_steps:
                    if column_name not in existing_columns:
                        connection.execute(text(statement))

                for statement in CLINIC_INDEXES.get(table_name, []):
                    connection.execute(text(statement))

        _clinic_schema_checked = True
