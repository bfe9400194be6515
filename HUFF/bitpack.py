EOS = -1  # returned by BitReader.read_bits when the stream runs dry

class BitWriter:
    def __init__(self, f):
        self.f = f
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.bits_written = 0

    def write_bits(self, n: int, value: int):
        """Write the low 'n' bits of value (MSB-first)."""
        out = bytearray()
        for i in range(n - 1, -1, -1):
            bit = (value >> i) & 1
            self._cur = (self._cur << 1) | bit
            self._nbits += 1
            if self._nbits == 8:
                out.append(self._cur)
                self._cur = 0
                self._nbits = 0
        if out:
            self.f.write(out)
        self.bits_written += n

    def close(self):
        """Pad remaining bits with zeros and flush. The file itself stays open."""
        if self._nbits > 0:
            self.f.write(bytes([self._cur << (8 - self._nbits)]))
            self._cur = 0
            self._nbits = 0
        self.f.flush()

class BitReader:
    def __init__(self, f):
        self.f = f
        self._start = f.tell()
        self._cur = 0
        self._nbits = 0  # unread bits left in _cur
        self.bits_read = 0

    def read_bits(self, n: int) -> int:
        """Next 'n' bits as an unsigned int (MSB-first), or EOS."""
        while self._nbits < n:
            b = self.f.read(1)
            if not b:
                return EOS
            self._cur = (self._cur << 8) | b[0]
            self._nbits += 8
        self._nbits -= n
        value = (self._cur >> self._nbits) & ((1 << n) - 1)
        self._cur &= (1 << self._nbits) - 1
        self.bits_read += n
        return value

    def read_bit(self) -> int:
        return self.read_bits(1)

    def reset(self):
        self.f.seek(self._start)
        self._cur = 0
        self._nbits = 0
        self.bits_read = 0
