from abc import ABC, abstractmethod


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


class BaseDb(ABC):
    placeholder: str
    driver_name: str
    table_prefix: str = ''

    @abstractmethod
    def save(self):
        pass

    @abstractmethod
    def close(self):
        pass

    @abstractmethod
    def save_and_close(self):
        pass

    @abstractmethod
    def run_query_tuple(self, sql_string: str, params: tuple=None, commit: bool=False):
        pass

    @abstractmethod
    def run_query_dict(self, sql_string: str, params: tuple=None, commit: bool=False):
        pass

    @abstractmethod
    def run_affecting_statement(self, sql_string: str, params: tuple=None, commit: bool=True) -> int:
        """Run a write statement and return the number of affected rows reported by the driver."""
        pass
