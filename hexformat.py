import io

BYTES_PER_LINE = 16
GROUP_SIZE = 2
GROUPS_PER_LINE = BYTES_PER_LINE // GROUP_SIZE


class LimitedReader(io.RawIOBase):
    """Hands out at most `limit` bytes of `source`, then reports end of stream."""

    def __init__(self, source, limit):
        if not isinstance(limit, int) or limit < 0:
            raise ValueError(f"limit must be a non-negative integer, got {limit!r}")
        self.source = source
        self._remaining = limit

    @property
    def remaining(self):
        return self._remaining

    def readable(self):
        return True

    def readinto(self, b):
        if self._remaining == 0:
            return 0
        view = memoryview(b).cast('B')
        n = self.source.readinto(view[:min(len(view), self._remaining)])
        if n:
            self._remaining -= n
        return n


class HexFormatter:
    def __init__(self):
        self.hex16 = list(map("{:04x}".format, range(0x10000)))
        self.blank = ' ' * 4

    def format_chunk(self, buffer, filled_count):
        if not 0 <= filled_count <= BYTES_PER_LINE:
            raise ValueError(f"filled_count must be in 0..{BYTES_PER_LINE}, got {filled_count}")
        groups = []
        for i in range(0, BYTES_PER_LINE, GROUP_SIZE):
            if i + 1 < filled_count:
                groups.append(self.hex16[buffer[i + 1] << 8 | buffer[i]])
            elif i < filled_count:
                groups.append(self.hex16[buffer[i]])
            else:
                groups.append(self.blank)
        return ' '.join(groups)

    def format_line(self, offset, buffer, filled_count):
        return f"{offset:08x} {self.format_chunk(buffer, filled_count)}"

    def dump(self, source):
        """Yields one newline-terminated line per chunk read from `source`,
        then the final offset line. Read errors propagate to the caller."""
        buffer = bytearray(BYTES_PER_LINE)
        offset = 0
        while n := source.readinto(buffer):
            yield self.format_line(offset, buffer, n) + '\n'
            offset += n
        yield f"{offset:08x}\n"

    def run(self, source, sink, byte_limit=None):
        if byte_limit is not None:
            source = LimitedReader(source, byte_limit)
        sink.writelines(self.dump(source))
