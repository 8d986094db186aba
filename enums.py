from enum import Enum


class Driver(Enum):
    mysql = 'mysql'
    sqlite = 'sqlite'
