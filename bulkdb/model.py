from bulkdb.base import BaseDb
from bulkdb.connection import get_default_db
from utils import table_name_for


class Model:
    """Minimal table binding for the bulk insert mixin.

    Subclasses set `table` and `primary_key`, and optionally `db`. Without an
    explicit `db` the process-wide connection built from configs is used.
    """
    table: str | None = None
    primary_key: str | tuple[str, ...] = 'id'
    db: BaseDb | None = None


    @classmethod
    def get_table(cls) -> str:
        return cls.table or table_name_for(cls.__name__)


    @classmethod
    def get_connection(cls) -> BaseDb:
        return cls.db if cls.db is not None else get_default_db()


    @classmethod
    def get_key_name(cls) -> str | tuple[str, ...]:
        return cls.primary_key
