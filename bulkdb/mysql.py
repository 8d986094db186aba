import mysql.connector

import configs
from bulkdb.base import BaseDb, DotDict
from enums import Driver


class MysqlDb(BaseDb):
    placeholder = '%s'
    driver_name = Driver.mysql.value


    def __init__(self, host: str, user: str, password: str, database: str, port: int=3306, table_prefix: str='', sql_echo: bool=False):
        self.conn = mysql.connector.connect(
            host=host,
            user=user,
            password=password,
            database=database,
            port=port,
            autocommit=False
        )
        self.table_prefix = table_prefix
        self.sql_echo = sql_echo


    def save(self):
        self.conn.commit()


    def close(self):
        self.conn.close()


    def save_and_close(self):
        self.save()
        self.close()


    def _row_to_dict(self, cursor, row: tuple) -> DotDict:
        keys = [col[0] for col in cursor.description]
        return DotDict(zip(keys, row))


    def _echo(self, sql_string: str, params: tuple):
        if self.sql_echo:
            configs.logger.info(f'{sql_string=}\n{params=}')


    def _run_query(self, sql_string: str, params: tuple=None, commit: bool=False, dict_row: bool=True):
        self._echo(sql_string, params)

        cursor = self.conn.cursor()
        cursor.execute(sql_string, params or ())
        results = cursor.fetchall()

        if dict_row:
            results = [self._row_to_dict(cursor, row) for row in results]

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

        cursor = self.conn.cursor()
        try:
            cursor.execute(sql_string, params or ())
            rowcount = cursor.rowcount
        finally:
            cursor.close()

        if commit:
            self.conn.commit()

        return rowcount
