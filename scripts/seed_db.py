from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "hr_records"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from hr_records.database.bootstrap import ensure_default_user


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    created = ensure_default_user(
        db_config,
        username=settings.DEFAULT_HR_USERNAME,
        password=settings.DEFAULT_HR_PASSWORD,
        full_name=settings.DEFAULT_HR_FULL_NAME,
    )

    print(
        ("OK: Created " if created else "OK: Already present ")
        + f"'{settings.DEFAULT_HR_USERNAME}' -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
