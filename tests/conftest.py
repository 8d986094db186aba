from types import SimpleNamespace

import pytest

from bulkdb.base import BaseDb
from bulkdb.insert_on_duplicate_key import InsertOnDuplicateKey
from bulkdb.model import Model
from bulkdb.sqlite import SqliteDb


class FakeDb(BaseDb):
    """Records statements instead of running them."""

    def __init__(self, driver_name: str, placeholder: str, table_prefix: str='', rowcount: int=0):
        self.driver_name = driver_name
        self.placeholder = placeholder
        self.table_prefix = table_prefix
        self.rowcount = rowcount
        self.statements = []

    def save(self):
        pass

    def close(self):
        pass

    def save_and_close(self):
        pass

    def run_query_tuple(self, sql_string: str, params: tuple=None, commit: bool=False):
        return []

    def run_query_dict(self, sql_string: str, params: tuple=None, commit: bool=False):
        return []

    def run_affecting_statement(self, sql_string: str, params: tuple=None, commit: bool=True) -> int:
        self.statements.append((sql_string, params))
        return self.rowcount


def create_test_sqlite_db(table_prefix: str='prefix_') -> SqliteDb:
    """Create an in-memory SQLite database with the test user table."""
    sqlite_db = SqliteDb(':memory:', table_prefix=table_prefix)

    sqlite_db.conn.execute(f'''
        CREATE TABLE IF NOT EXISTS `{table_prefix}test_user_table` (
            id INTEGER PRIMARY KEY,
            email TEXT UNIQUE,
            name TEXT
        )
    ''')

    return sqlite_db


@pytest.fixture
def mock_configs(monkeypatch):
    cfg = SimpleNamespace(
        db_type='sqlite',
        db_sqlite_path=':memory:',
        db_mysql_host='localhost',
        db_mysql_user='root',
        db_mysql_password='',
        db_mysql_database='bulk',
        db_mysql_port=3306,
        db_table_prefix='',
        db_echo=False,
        insert_batch_size=None,
        logger=SimpleNamespace(info=lambda s: None, debug=lambda s: None, warning=lambda s: None),
    )
    monkeypatch.setattr('bulkdb.insert_on_duplicate_key.configs', cfg)
    monkeypatch.setattr('bulkdb.connection.configs', cfg)
    monkeypatch.setattr('bulkdb.sqlite.configs', cfg)
    monkeypatch.setattr('bulkdb.mysql.configs', cfg)

    return cfg


@pytest.fixture
def mysql_db():
    return FakeDb('mysql', '%s', table_prefix='prefix_', rowcount=3)


@pytest.fixture
def sqlite_fake_db():
    return FakeDb('sqlite', '?', table_prefix='prefix_', rowcount=3)


@pytest.fixture
def user_mysql(mysql_db):
    class UserMysqlTest(InsertOnDuplicateKey, Model):
        table = 'test_user_table'
        primary_key = 'uuid'
        db = mysql_db

    return UserMysqlTest


@pytest.fixture
def user_sqlite(sqlite_fake_db):
    class UserSqliteTest(InsertOnDuplicateKey, Model):
        table = 'test_user_table'
        primary_key = 'uuid'
        db = sqlite_fake_db

    return UserSqliteTest


@pytest.fixture
def sqlite_db():
    db = create_test_sqlite_db()
    yield db
    db.close()


@pytest.fixture
def user_live(sqlite_db):
    class User(InsertOnDuplicateKey, Model):
        table = 'test_user_table'
        db = sqlite_db

    return User


@pytest.fixture
def users():
    return [
        {'id': 1, 'email': 'user1@email.com', 'name': 'User One'},
        {'id': 2, 'email': 'user2@email.com', 'name': 'User Two'},
        {'id': 3, 'email': 'user3@email.com', 'name': 'User Three'},
    ]
