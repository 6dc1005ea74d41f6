from enum import Enum


class Lifetime(Enum):
    TRANSIENT = 1
    SINGLETON = 2
