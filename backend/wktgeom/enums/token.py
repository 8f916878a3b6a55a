from enum import StrEnum


class Token(StrEnum):
    POINT = 'POINT'
    MULTIPOINT = 'MULTIPOINT'
    LINESTRING = 'LINESTRING'
    CIRCULARSTRING = 'CIRCULARSTRING'
    MULTILINESTRING = 'MULTILINESTRING'
    POLYGON = 'POLYGON'
    MULTIPOLYGON = 'MULTIPOLYGON'

    OPENING_PARENTHESIS = '('
    CLOSING_PARENTHESIS = ')'
    COMMA = ','
    MINUS = '-'

    Z = 'Z'
    M = 'M'
    ZM = 'ZM'
    EMPTY = 'EMPTY'
