import sys
import os

# Add the project root to the python path so we can import from database
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from sqlalchemy import inspect

from database.db import engine, init_db


def create_tables():
    """Creates the word and enrichment cache tables if they do not exist."""
    init_db()

    existing = set(inspect(engine).get_table_names())
    for table in sorted(existing):
        print(f" - {table}")
    print(f"Database ready at {engine.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    create_tables()
