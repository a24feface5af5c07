# scripts/check_db.py
# Проверяет подключение к DATABASE_URL из app.core.config.settings
# и выводит количество строк в таблицах магазина.
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from app.db.session import engine

TABLES = ("users", "profiles", "categories", "products", "shopping_cart")

def main():
    print('Trying to connect to:', engine.url.render_as_string(hide_password=True))
    try:
        with engine.connect() as conn:
            print('Connection OK, SELECT 1 ->', conn.execute(text("SELECT 1")).scalar())
            existing = set(inspect(conn).get_table_names())
            for table in TABLES:
                if table not in existing:
                    print(f'{table}: missing')
                    continue
                count = conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()
                print(f'{table}: {count} rows')
    except SQLAlchemyError as e:
        print('Connection failed:', e)

if __name__ == '__main__':
    main()
