import enum


class CoordinateType(enum.IntEnum):
    UNDEFINED = 0
    XY = 1
    XYZ = 2
    XYM = 3
    XYZM = 4
    EMPTY = 5

    @property
    def dimension(self) -> int:
        return _DIMENSIONS.get(self, 0)

    @property
    def has_z(self) -> bool:
        return self in (CoordinateType.XYZ, CoordinateType.XYZM)

    @property
    def has_m(self) -> bool:
        return self in (CoordinateType.XYM, CoordinateType.XYZM)


_DIMENSIONS = {
    CoordinateType.XY: 2,
    CoordinateType.XYZ: 3,
    CoordinateType.XYM: 3,
    CoordinateType.XYZM: 4,
}
