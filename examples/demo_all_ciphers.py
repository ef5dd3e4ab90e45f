"""
classical_ciphers — Live Demo: Every Cipher
===========================================
Run:  python examples/demo_all_ciphers.py [-v]

Shows every cipher encrypting and decrypting the same message,
with keys, ciphertexts and timings printed for each.
Pass -v to see the library's DEBUG log lines.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_ciphers import (
    CipherKind, make_cipher, generate_key,
    MatrixCipher, PairCipher, FourSquareCipher,
)

LINE = "═" * 70
MSG  = "Hide the gold in the tree stump"

if "-v" in sys.argv:
    logging.basicConfig(level=logging.DEBUG, format=" %(name)s: %(message)s")

def header(kind, name):
    print(f"\n{LINE}")
    print(f"  {kind.value.upper()} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def show(value, width=48):
    text = repr(value) if not isinstance(value, str) or not value.isprintable() else value
    return text if len(text) <= width else text[:width] + "..."

def run(kind, name, key):
    header(kind, name)
    t0  = time.perf_counter()
    c   = make_cipher(kind, key)
    ct  = c.encrypt(MSG)
    pt  = c.decrypt(ct)
    elapsed = time.perf_counter() - t0
    ok("Key",        show(c.key))
    ok("Encrypted",  show(ct))
    ok("Decrypted",  show(pt))
    ok("Round-trip", f"{elapsed*1000:.3f} ms")
    return c

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  classical_ciphers — Demo")
print(LINE)
print(f"  Message: {MSG}")

run(CipherKind.CAESAR,   "Monoalphabetic shift",       3)
run(CipherKind.VIGENERE, "Polyalphabetic substitution", "LEMON")
print("  (spaces removed and letters uppercased on the way in)")
run(CipherKind.VERNAM,   "XOR stream",                 generate_key(CipherKind.VERNAM))

m = run(CipherKind.MATRIX, "Columnar transposition",   "ZEBRA")
ok("Column order", MatrixCipher.column_order(m.key))

p = run(CipherKind.PAIR,   "Playfair digraphs",        "PLAYFAIR EXAMPLE")
ok("Digraphs", " ".join(a + b for a, b in PairCipher.prepare(MSG)))
print()
for row in str(p.square).splitlines():
    print(f"       {row}")

run(CipherKind.FOUR_SQUARE, "Two-key digraphs",        ("EXAMPLE", "KEYWORD"))
ok("Chunks", " ".join(FourSquareCipher.prepare(MSG)))

run(CipherKind.AES, "AES-128 / ECB / PKCS#7 / Base64", generate_key(CipherKind.AES))
run(CipherKind.DES, "DES / ECB / PKCS#7 / Base64",     generate_key(CipherKind.DES))

# ── Summary ───────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  ALL CIPHERS COMPLETE")
print(f"  {LINE}")
print("  Caesar       shift                    — Suetonius, 1st c. BC")
print("  Vigenère     repeating key            — Bellaso, 1553")
print("  Vernam       XOR stream               — Vernam, 1917")
print("  Matrix       columnar transposition   — field cipher, WWI")
print("  Pair         Playfair digraphs        — Wheatstone, 1854")
print("  Four-Square  two keyed squares        — Delastelle, 1902")
print("  AES / DES    block collaborators      — FIPS 197 / FIPS 46")
print(f"  {LINE}")
print("  None of these protect data today. They teach how ciphers work.")
print(LINE + "\n")
