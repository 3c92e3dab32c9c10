from .base import AcademyApi, DashboardFacade, EntityFacade, ENTITIES
from .sql import build_sql_api
from .remote import build_http_api
