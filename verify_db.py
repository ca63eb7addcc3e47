"""Verify the catalog tables exist"""
from sqlalchemy import inspect
from catalog.database import Base, engine
from catalog.models import *

inspector = inspect(engine)
tables = set(inspector.get_table_names())
expected = set(Base.metadata.tables)

print(f"Database has {len(tables)} tables:")
for table in sorted(tables):
    print(f"  - {table}")

missing = expected - tables
if missing:
    print(f"Missing tables: {', '.join(sorted(missing))}")
    exit(1)
