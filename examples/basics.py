from reactify import unwrap, wrap

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Wrapping a dictionary")
print("-" * 100)
print()

# The target stays a plain dict. The surrogate reads from it and writes into it.
a = {"형규": "솔로"}

# Every real change is reported to the callback as one line.
b = wrap(a, print)

# "솔로" is already stored, so nothing is printed.
b.형규 = "솔로"

# This is a change: the dict is updated first, then the callback runs.
b.형규 = "커플"  # 형규가 [솔로] >> [커플] 로 변경되었습니다

print(f"a['형규'] is now {a['형규']!r}")

# Item syntax and the usual dict helpers go through the same check.
b["형규"] = "커플"  # no output
b.update({"나이": 30})  # 나이가 [undefined] >> [30] 로 변경되었습니다

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Wrapping an object")
print("-" * 100)
print()


class Session:
    def __init__(self):
        self.user = "alice"
        self.status = "offline"


session = wrap(Session(), print)

print(f"user: {session.user}")  # Reads pass straight through.
session.status = "online"  # status가 [offline] >> [online] 로 변경되었습니다
session.status = "online"  # no output

print(f"unwrapped status: {unwrap(session).status}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Custom message template")
print("-" * 100)
print()

counter = wrap({"clicks": 0}, print, template="{name}: {previous} -> {current}")

for _ in range(3):
    counter.clicks += 1  # clicks: 0 -> 1, clicks: 1 -> 2, clicks: 2 -> 3
