from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from src.config import IMPORT_ADMIN_ROLES
from src.lib.db_con import get_session
from src.api.core.security import require_role


GetSession = Annotated[Session, Depends(get_session)]

requireImportAdmin = Annotated[dict, Depends(require_role(IMPORT_ADMIN_ROLES))]
