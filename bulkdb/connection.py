import functools

import configs
from bulkdb.base import BaseDb
from bulkdb.mysql import MysqlDb
from bulkdb.sqlite import SqliteDb
from enums import Driver


def create_db() -> BaseDb:
    if configs.db_type == Driver.mysql.value:
        db = MysqlDb(
            host=configs.db_mysql_host,
            user=configs.db_mysql_user,
            password=configs.db_mysql_password,
            database=configs.db_mysql_database,
            port=configs.db_mysql_port,
            table_prefix=configs.db_table_prefix,
            sql_echo=configs.db_echo
        )
    elif configs.db_type == Driver.sqlite.value:
        db = SqliteDb(configs.db_sqlite_path, table_prefix=configs.db_table_prefix, sql_echo=configs.db_echo)
    else:
        raise ValueError(configs.db_type)

    configs.logger.info(f'Connected to {db.driver_name} database.')
    return db


@functools.lru_cache(maxsize=1)
def get_default_db() -> BaseDb:
    return create_db()
