"""
Script to recreate the SQLite development database from the ORM metadata
"""
import os
from sqlalchemy import inspect
from sqlalchemy.engine import make_url
from catalog.config import settings
from catalog.database import Base, engine
from catalog.models import *

url = make_url(settings.DATABASE_URL)
if url.get_backend_name() != "sqlite":
    print(f"Refusing to drop a {url.get_backend_name()} database; use `alembic upgrade head` instead")
    exit(1)

# Delete existing database if it exists
db_file = url.database
if db_file and os.path.exists(db_file):
    try:
        os.remove(db_file)
        print(f"Deleted existing {db_file}")
    except OSError as e:
        print(f"Could not delete {db_file}: {e}")
        print("Please stop the server and try again")
        exit(1)

# Create all tables
print("Creating database tables...")
Base.metadata.create_all(bind=engine)
print("Database created successfully!")

# Verify tables were created
tables = inspect(engine).get_table_names()
print(f"Created tables: {', '.join(tables)}")
