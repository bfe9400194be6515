from bitpack import EOS
from huffman import Node, BITS_PER_WORD, ALPH_SIZE, PSEUDO_EOF

BITS_PER_INT = 32
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1
MAGIC = HUFF_TREE

DEBUG_LOW = 1
DEBUG_HIGH = 4

# Stream layout (MSB-first bits):
# magic(32)
# tree: pre-order, internal = 0 <left> <right>, leaf = 1 symbol(9)
# body: one code per input byte, PSEUDO_EOF code, zero pad to byte
LEAF_BITS = BITS_PER_WORD + 1


class HuffError(ValueError):
    kind = "huff-error"


class BadMagic(HuffError):
    kind = "bad-magic"


class TruncatedHeader(HuffError):
    kind = "truncated-header"


class MalformedHeader(HuffError):
    kind = "malformed-header"


class TruncatedBody(HuffError):
    kind = "truncated-body"


def write_magic(bw):
    bw.write_bits(BITS_PER_INT, MAGIC)

def read_magic(br):
    magic = br.read_bits(BITS_PER_INT)
    if magic == EOS:
        raise BadMagic("Malformed stream: shorter than the magic number")
    if magic != MAGIC:
        raise BadMagic(f"Bad magic number 0x{magic:08x} (expected 0x{MAGIC:08x})")
    return magic

def write_tree(bw, node: Node):
    if node.sym is not None:
        bw.write_bits(1, 1)
        bw.write_bits(LEAF_BITS, node.sym)
        return
    bw.write_bits(1, 0)
    write_tree(bw, node.left)
    write_tree(bw, node.right)

def read_tree(br, depth: int = 0) -> Node:
    """
    Rebuild the tree written by write_tree.
    Raises TruncatedHeader if the stream ends inside the tree,
    MalformedHeader if it describes something no encoder could produce.
    """
    if depth > ALPH_SIZE:
        raise MalformedHeader(f"Malformed header: tree deeper than {ALPH_SIZE}")
    bit = br.read_bit()
    if bit == EOS:
        raise TruncatedHeader("Malformed stream: tree header truncated")
    if bit == 0:
        left = read_tree(br, depth + 1)
        right = read_tree(br, depth + 1)
        return Node(freq=0, left=left, right=right)
    sym = br.read_bits(LEAF_BITS)
    if sym == EOS:
        raise TruncatedHeader("Malformed stream: leaf symbol truncated")
    if sym > PSEUDO_EOF:
        raise MalformedHeader(f"Malformed header: leaf symbol {sym} out of range")
    return Node(freq=0, sym=sym)

def header_bits(node: Node) -> int:
    """Size in bits of the serialized tree."""
    if node.sym is not None:
        return 1 + LEAF_BITS
    return 1 + header_bits(node.left) + header_bits(node.right)
