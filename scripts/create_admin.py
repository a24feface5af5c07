# scripts/create_admin.py
# Создаёт администратора с пустым профилем.
# Использование: python -m scripts.create_admin <username> <password>
import sys

from app.core.errors import ValidationFailure
from app.core.security import get_password_hash
from app.dao import users
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.user import RoleEnum

import app.models.profile
import app.models.product
import app.models.cart

def main():
    if len(sys.argv) != 3:
        print('Usage: python -m scripts.create_admin <username> <password>')
        sys.exit(2)
    username, password = sys.argv[1], sys.argv[2]
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = users.create_with_profile(db, username, get_password_hash(password), role=RoleEnum.admin)
        print(f'Admin {user.username} created with id {user.id}')
    except ValidationFailure as e:
        print('Failed:', e.message)
        sys.exit(1)
    finally:
        db.close()

if __name__ == '__main__':
    main()
