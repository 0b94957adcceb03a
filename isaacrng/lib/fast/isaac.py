from __future__ import annotations

from isaacrng.lib.isaac import GOLDEN_RATIO, Driver, IsaacBase, check_seed

_U = 0xFFFFFFFF


def _mix(a: int, b: int, c: int, d: int, e: int, f: int, g: int, h: int):
    a ^= b << 0x0B & _U; d = d + a & _U; b = b + c & _U # noqa
    b ^= c >> 0x02 & _U; e = e + b & _U; c = c + d & _U # noqa
    c ^= d << 0x08 & _U; f = f + c & _U; d = d + e & _U # noqa
    d ^= e >> 0x10 & _U; g = g + d & _U; e = e + f & _U # noqa
    e ^= f << 0x0A & _U; h = h + e & _U; f = f + g & _U # noqa
    f ^= g >> 0x04 & _U; a = a + f & _U; g = g + h & _U # noqa
    g ^= h << 0x08 & _U; b = b + g & _U; h = h + a & _U # noqa
    h ^= a >> 0x09 & _U; c = c + h & _U; a = a + b & _U # noqa
    return a, b, c, d, e, f, g, h


def seed(mm: list[int], rr: list[int]) -> None:
    r = _mix(*(GOLDEN_RATIO,) * 8)
    r = _mix(*r)
    r = _mix(*r)
    r = _mix(*r)
    for src in (rr, mm):
        for i in range(0, 0x100, 8):
            a, b, c, d, e, f, g, h = r
            r = _mix(
                a + src[i + 0] & _U,
                b + src[i + 1] & _U,
                c + src[i + 2] & _U,
                d + src[i + 3] & _U,
                e + src[i + 4] & _U,
                f + src[i + 5] & _U,
                g + src[i + 6] & _U,
                h + src[i + 7] & _U,
            )
            mm[i:i + 8] = r


def generate(mm: list[int], rr: list[int], aa: int, bb: int, cc: int) -> tuple[int, int, int]:
    cc = cc + 1 & _U
    bb = bb + cc & _U
    for i in range(0, 0x100, 4):
        j = i ^ 0x80
        x = mm[i]
        aa = (aa ^ aa << 13) + mm[j] & _U
        mm[i] = y = mm[x >> 2 & 0xFF] + aa + bb & _U
        rr[i] = bb = mm[y >> 10 & 0xFF] + x & _U
        i += 1
        x = mm[i]
        aa = (aa ^ aa >> 6) + mm[j + 1] & _U
        mm[i] = y = mm[x >> 2 & 0xFF] + aa + bb & _U
        rr[i] = bb = mm[y >> 10 & 0xFF] + x & _U
        i += 1
        x = mm[i]
        aa = (aa ^ aa << 2) + mm[j + 2] & _U
        mm[i] = y = mm[x >> 2 & 0xFF] + aa + bb & _U
        rr[i] = bb = mm[y >> 10 & 0xFF] + x & _U
        i += 1
        x = mm[i]
        aa = (aa ^ aa >> 16) + mm[j + 3] & _U
        mm[i] = y = mm[x >> 2 & 0xFF] + aa + bb & _U
        rr[i] = bb = mm[y >> 10 & 0xFF] + x & _U
    return aa, bb, cc


class IsaacFast(IsaacBase):
    """
    An unrolled variant of `isaacrng.lib.isaac.Isaac` that keeps all state in local variables
    while generating a block. It accepts the same seeds and produces the same output.
    """
    driver = Driver.FAST

    def __init__(self, *seed_words: int):
        words = check_seed(seed_words)
        self._mm = mm = [0] * 0x100
        self._rr = rr = words + [0] * (0x100 - len(words))
        seed(mm, rr)
        self._aa, self._bb, self._cc = generate(mm, rr, 0, 0, 0)
        self._cursor = 0

    def _refresh(self):
        self._aa, self._bb, self._cc = generate(self._mm, self._rr, self._aa, self._bb, self._cc)
        self._cursor = 0

    def irand(self) -> int:
        cursor = self._cursor
        if cursor >= 0x100:
            self._refresh()
            cursor = 0
        self._cursor = cursor + 1
        return self._rr[cursor]

    def words(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(F'cannot draw a negative number of words: {count}')
        out: list[int] = []
        while count > 0:
            if self._cursor >= 0x100:
                self._refresh()
            cursor = self._cursor
            take = min(count, 0x100 - cursor)
            out.extend(self._rr[cursor:cursor + take])
            self._cursor = cursor + take
            count -= take
        return out
