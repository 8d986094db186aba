import sqlite3

import configs
from bulkdb.base import BaseDb, DotDict
from enums import Driver


def row_factory(cursor, row: tuple):
    keys = [col[0] for col in cursor.description]
    return DotDict(zip(keys, row))


class SqliteDb(BaseDb):
    placeholder = '?'
    driver_name = Driver.sqlite.value


    def __init__(self, db_path: str, table_prefix: str='', sql_echo: bool=False):
        self.db_path = db_path
        self.conn = sqlite3.connect(self.db_path, autocommit=True)
        self.conn.row_factory = row_factory
        self.table_prefix = table_prefix
        self.sql_echo = sql_echo


    def save(self):
        self.conn.commit()


    def close(self):
        self.conn.close()


    def save_and_close(self):
        self.save()
        self.close()


    def _set_row_factory(self, dict_row: bool):
        if dict_row and not self.conn.row_factory:
            self.conn.row_factory = row_factory
            return

        if not dict_row and self.conn.row_factory:
            self.conn.row_factory = None
            return


    def _echo(self, sql_string: str, params: tuple):
        if self.sql_echo:
            configs.logger.info(f'{sql_string=}\n{params=}')


    def _run_query(self, sql_string: str, params: tuple=None, commit: bool=False, dict_row: bool=True):
        self._echo(sql_string, params)

        self._set_row_factory(dict_row)

        cursor = self.conn.execute(sql_string, params or ())
        results = cursor.fetchall()
        cursor.close()

        if commit:
            self.conn.commit()

        return results


    def run_query_tuple(self, sql_string: str, params: tuple=None, commit: bool=False):
        return self._run_query(sql_string, params, commit=commit, dict_row=False)


    def run_query_dict(self, sql_string: str, params: tuple=None, commit: bool=False):
        return self._run_query(sql_string, params, commit=commit, dict_row=True)


    def run_affecting_statement(self, sql_string: str, params: tuple=None, commit: bool=True) -> int:
        self._echo(sql_string, params)

        cursor = self.conn.execute(sql_string, params or ())
        rowcount = cursor.rowcount
        cursor.close()

        if commit:
            self.conn.commit()

        return rowcount
