import io
import logging
from typing import Dict, Optional

from bitpack import BitReader, BitWriter, EOS
from huffman import (BITS_PER_WORD, PSEUDO_EOF, Node, read_for_counts, build_tree, build_codebook,
                     count_leaves)
from metrics import entropy_bits, mean_code_length
from bitstream import (DEBUG_LOW, DEBUG_HIGH, write_magic, read_magic, write_tree, read_tree,
                       header_bits, MalformedHeader, TruncatedBody)

log = logging.getLogger(__name__)

def write_compressed_bits(codings: Dict[int, str], br, bw) -> int:
    """Second pass: one code per input word, then the PSEUDO_EOF code once."""
    n = 0
    while True:
        word = br.read_bits(BITS_PER_WORD)
        if word == EOS:
            break
        code = codings[word]
        bw.write_bits(len(code), int(code, 2))
        n += 1
    code = codings[PSEUDO_EOF]
    bw.write_bits(len(code), int(code, 2))
    return n

def read_compressed_bits(root: Node, br, bw) -> int:
    n = 0
    cur = root
    while True:
        bit = br.read_bit()
        if bit == EOS:
            raise TruncatedBody(f"Malformed stream: body ended before PSEUDO_EOF ({n} symbols decoded)")
        cur = cur.left if bit == 0 else cur.right
        if cur is None:
            raise MalformedHeader("Invalid Huffman code (walked off the tree)")
        if cur.is_leaf():
            if cur.sym == PSEUDO_EOF:
                break
            bw.write_bits(BITS_PER_WORD, cur.sym)
            n += 1
            cur = root
    return n

def compress(br, bw, debug: int = 0):
    """
    Returns:
      stats: bits_read (input), bits_written (output, before padding),
             symbols (input words), distinct (symbols in the tree incl. PSEUDO_EOF),
             entropy / mean_bits (bits per symbol, PSEUDO_EOF included)
    """
    counts = read_for_counts(br)
    root = build_tree(counts)
    codings = build_codebook(root)
    if debug >= DEBUG_LOW:
        log.info("counts: %d words, %d distinct symbols", int(counts.sum()) - 1, len(codings))
    if debug >= DEBUG_HIGH:
        for sym in sorted(codings):
            log.debug("code %3d  count=%d  %s", sym, int(counts[sym]), codings[sym])

    write_magic(bw)
    write_tree(bw, root)
    if debug >= DEBUG_LOW:
        log.info("header: %d bits, %d leaves", header_bits(root), count_leaves(root))
    n = write_compressed_bits(codings, br, bw)
    bw.close()

    stats = dict(bits_read=br.bits_read, bits_written=bw.bits_written,
                 symbols=n, distinct=len(codings),
                 entropy=entropy_bits(counts), mean_bits=mean_code_length(counts, codings))
    if debug >= DEBUG_LOW:
        log.info("compress: read %d bits, wrote %d bits", stats["bits_read"], stats["bits_written"])
    return stats

def read_header(br, debug: int = 0) -> Node:
    """Validate the magic number and rebuild the tree. Nothing is written."""
    read_magic(br)
    root = read_tree(br)
    if debug >= DEBUG_LOW:
        log.info("header: %d bits, %d leaves", header_bits(root), count_leaves(root))
    if debug >= DEBUG_HIGH and not root.is_leaf():
        for sym, code in sorted(build_codebook(root).items()):
            log.debug("code %3d  %s", sym, code)
    return root

def decompress(br, bw, debug: int = 0, root: Optional[Node] = None):
    """
    root: tree already obtained from read_header(br); read from br when None.
    """
    if root is None:
        root = read_header(br, debug=debug)
    n = read_compressed_bits(root, br, bw)
    bw.close()

    stats = dict(bits_read=br.bits_read, bits_written=bw.bits_written, symbols=n)
    if debug >= DEBUG_LOW:
        log.info("decompress: read %d bits, wrote %d bits", stats["bits_read"], stats["bits_written"])
    return stats

def compress_bytes(data: bytes, debug: int = 0) -> bytes:
    out = io.BytesIO()
    compress(BitReader(io.BytesIO(data)), BitWriter(out), debug=debug)
    return out.getvalue()

def decompress_bytes(blob: bytes, debug: int = 0) -> bytes:
    out = io.BytesIO()
    decompress(BitReader(io.BytesIO(blob)), BitWriter(out), debug=debug)
    return out.getvalue()
