from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# List-valued columns: JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JSONList = JSON().with_variant(JSONB(), 'postgresql')
