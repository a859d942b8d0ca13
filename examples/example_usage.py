"""Authenticate and list the catalog through the service layer, without Flask.

Controllers are thin; everything below is what they call.
"""

import importlib
import sys

from config import get_settings_module

from src.salon_system.salon_system.container import build_container
from src.salon_system.salon_system.users.model import AuthCommand
from src.salon_system.salon_system.users.tokens import JwtSettings


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, jwt_settings=JwtSettings.from_mapping(vars(settings)))

    login = sys.argv[1] if len(sys.argv) > 1 else "robert"
    password = sys.argv[2] if len(sys.argv) > 2 else "robert123"
    auth = container.auth_service.authenticate(AuthCommand(login=login, password=password))
    print(auth.to_dict())
    if auth.error:
        return

    claims = container.token_issuer.decode_token(auth.value)
    print("signed in as", claims["Login"], "role", claims["Role"])
    print(container.item_service.get_all_items().to_dict())


if __name__ == "__main__":
    main()
