import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.database import Base, engine, ensure_clinic_schema
from backend.models import appointment, patient, payment_method  # noqa: F401
from backend.routes import agenda_routes, clinic_routes

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title='Clinic Agenda API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        Base.metadata.create_all(bind=engine)
        ensure_clinic_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')


@app.get('/')
def root():
    return {'status': 'Clinic Agenda API Running'}


app.include_router(agenda_routes.router, prefix='/agenda')
app.include_router(clinic_routes.router)
