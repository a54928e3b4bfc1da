#!/usr/bin/env python3
"""
Criar o primeiro usuário administrador.

Executar a partir da raiz do projeto:
    python scripts/create_admin.py --username admin --email admin@direcional.com.br --password admin123
"""
import argparse
import logging
import sys

from direcional.config.database import SessionLocal, init_db
from direcional.core.auth.service import AuthService
from direcional.core.exceptions import ConflictError
from direcional.core.middleware import setup_logging
from direcional.shared.enums import UserRole

logger = logging.getLogger("create_admin")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Criar usuário administrador")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--email", default="admin@direcional.com.br")
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    setup_logging()
    init_db()

    db = SessionLocal()
    try:
        user = AuthService.register_user(
            db, args.username, args.email, args.password, role=UserRole.ADMIN.value
        )
        logger.info(f"✅ Administrador criado: {user.username} (ID: {user.id})")
        return 0
    except ConflictError as e:
        logger.error(f"❌ {e.message}")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
