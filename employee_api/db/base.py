from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# Import models so create_all can discover them
from employee_api.models import *  # noqa
