from arithparse.report import run

for code, declared in [
    ("5", ()),
    ("12.34", ()),
    ("12.", ()),
    ("1 + 1", ()),
    ("4 + 6 * 3", ()),
    ("(4 + 6)", ()),
    ("(4+6) * 3", ()),
    ("7/6/2000", ()),
    ("10 / 5/ 2", ()),
    ("5/0", ()),
    ("(1+2", ()),
    (")", ()),
    ("-1", ()),
    (".5", ()),
    ("x + 1", ()),
    ("x + 1", ("x",)),
    ("1 2", ()),
    ("a = 1", ()),
]:
    print("=" * 10)
    print(f"code: {code!r}, declared: {list(declared)}")
    print(run(code, declared=declared))
