from collections.abc import Mapping, Sequence
from itertools import batched

import configs
from bulkdb.base import BaseDb
from enums import Driver


class InsertOnDuplicateKey:
    """Bulk INSERT ... ON DUPLICATE KEY UPDATE, INSERT IGNORE and REPLACE INTO.

    Mix into a Model:

        class User(InsertOnDuplicateKey, Model):
            table = 'users'

        User.insert_on_duplicate_key([
            {'id': 1, 'name': 'John'},
            {'id': 2, 'name': 'Mike'},
        ])

    Every row in a batch must have the same columns. Values are always bound as
    params, only column and table names end up in the SQL text.

    On SQLite the upsert fires on any unique constraint, like MySQL. Set
    `upsert_conflict_key` to restrict it to one key.
    """
    upsert_conflict_key: str | tuple[str, ...] | None = None


    @classmethod
    def insert_on_duplicate_key(cls, data: Sequence[Mapping] | Mapping, update_columns: Sequence[str] | None=None, batch_size: int=None) -> int | bool:
        """Insert rows, updating `update_columns` (all columns when empty) on key collision.

        Returns the driver's affected row count. For MySQL that is 1 per inserted row,
        2 per updated row and 0 per unchanged row. Returns False for empty data.
        """
        return cls._run_batches(data, lambda rows: cls._build_insert_on_duplicate_sql(rows, update_columns), batch_size)


    @classmethod
    def insert_ignore(cls, data: Sequence[Mapping] | Mapping, batch_size: int=None) -> int | bool:
        """Insert rows, silently skipping rows that collide on a key. Returns rows inserted."""
        return cls._run_batches(data, cls._build_insert_ignore_sql, batch_size)


    @classmethod
    def replace(cls, data: Sequence[Mapping] | Mapping, batch_size: int=None) -> int | bool:
        """REPLACE INTO. MySQL reports more than one affected row per replaced row."""
        return cls._run_batches(data, cls._build_replace_sql, batch_size)


    @classmethod
    def get_table_name(cls) -> str:
        return cls.get_table()


    @classmethod
    def get_model_connection(cls) -> BaseDb:
        return cls.get_connection()


    @classmethod
    def get_table_prefix(cls) -> str:
        return cls.get_model_connection().table_prefix


    @classmethod
    def get_driver_name(cls) -> str:
        return cls.get_model_connection().driver_name


    @classmethod
    def get_primary_key(cls) -> str | tuple[str, ...]:
        return cls.get_key_name()


    @classmethod
    def _run_batches(cls, data, build_sql, batch_size: int | None):
        if not data:
            return False

        # a single row
        if isinstance(data, Mapping):
            data = [data]

        # the whole batch is checked before any chunk is written
        rows = cls._normalize_rows(data)

        batch_size = batch_size or configs.insert_batch_size
        chunks = batched(rows, batch_size) if batch_size else [rows]

        db = cls.get_model_connection()
        affected = 0
        for chunk in chunks:
            sql = build_sql(chunk)
            params = tuple(cls._inline_array(chunk))
            affected += db.run_affecting_statement(sql, params=params, commit=True)
            configs.logger.debug(f'{cls.get_table_name()}: {len(chunk)} rows sent, {affected} affected')

        return affected


    @classmethod
    def _build_question_marks(cls, data) -> str:
        ph = cls.get_model_connection().placeholder
        return ', '.join('(' + ','.join([ph] * len(row)) + ')' for row in data)


    @classmethod
    def _get_first_row(cls, data) -> Mapping:
        if not data:
            raise ValueError('Empty data.')

        first = data[0]

        if not isinstance(first, Mapping):
            raise ValueError('data is not a list of mappings.')

        return first


    @classmethod
    def _get_column_list(cls, first: Mapping) -> str:
        if not first:
            raise ValueError('Empty row.')

        return ','.join(cls._quote(col) for col in first)


    @classmethod
    def _quote(cls, identifier: str) -> str:
        return '`' + identifier.replace('`', '``') + '`'


    @classmethod
    def _build_values_list(cls, columns) -> str:
        return ', '.join(f'{cls._quote(col)} = VALUES({cls._quote(col)})' for col in columns)


    @classmethod
    def _build_excluded_list(cls, columns) -> str:
        return ', '.join(f'{cls._quote(col)} = excluded.{cls._quote(col)}' for col in columns)


    @classmethod
    def _inline_array(cls, data) -> list:
        columns = list(cls._get_first_row(data))
        expected = set(columns)

        values = []
        for i, row in enumerate(data):
            if set(row) != expected:
                raise ValueError(f'Row {i} columns {sorted(row)} do not match {sorted(expected)}.')
            values.extend(row[col] for col in columns)

        return values


    @classmethod
    def _normalize_rows(cls, data) -> list[dict]:
        """Check every row against the first and return them in the first row's column order."""
        columns = list(cls._get_first_row(data))
        values = cls._inline_array(data)
        width = len(columns)
        return [dict(zip(columns, values[i:i + width])) for i in range(0, len(values), width)]


    @classmethod
    def _get_insert_prefix(cls, verb: str, first: Mapping) -> str:
        return f'{verb} INTO {cls._quote(cls.get_table_prefix() + cls.get_table_name())}({cls._get_column_list(first)}) VALUES'


    @classmethod
    def _build_insert_on_duplicate_sql(cls, data, update_columns: Sequence[str] | None=None) -> str:
        first = cls._get_first_row(data)
        if isinstance(update_columns, str):
            update_columns = (update_columns,)
        columns = update_columns or list(first)

        lines = [
            cls._get_insert_prefix('INSERT', first),
            cls._build_question_marks(data),
            cls._get_upsert_clause(columns),
        ]
        return '\n'.join(lines)


    @classmethod
    def _get_upsert_clause(cls, columns) -> str:
        if cls.get_driver_name() == Driver.sqlite.value:
            keys = cls.upsert_conflict_key
            if not keys:
                return f'ON CONFLICT DO UPDATE SET {cls._build_excluded_list(columns)}'

            if isinstance(keys, str):
                keys = (keys,)
            conflict = ','.join(cls._quote(k) for k in keys)
            return f'ON CONFLICT({conflict}) DO UPDATE SET {cls._build_excluded_list(columns)}'

        return f'ON DUPLICATE KEY UPDATE {cls._build_values_list(columns)}'


    @classmethod
    def _build_insert_ignore_sql(cls, data) -> str:
        first = cls._get_first_row(data)
        driver_name = cls.get_driver_name()

        get_verb = getattr(cls, f'_get_{driver_name}_insert_ignore_sql', None)
        if get_verb is None:
            raise ValueError(driver_name)

        return cls._get_insert_prefix(get_verb(), first) + '\n' + cls._build_question_marks(data)


    @classmethod
    def _get_mysql_insert_ignore_sql(cls) -> str:
        return 'INSERT IGNORE'


    @classmethod
    def _get_sqlite_insert_ignore_sql(cls) -> str:
        return 'INSERT OR IGNORE'


    @classmethod
    def _build_replace_sql(cls, data) -> str:
        first = cls._get_first_row(data)
        return cls._get_insert_prefix('REPLACE', first) + '\n' + cls._build_question_marks(data)
