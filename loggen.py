import random

MESSAGES = [
    "mice in the air",
    "could've been bad",
    "some strange error",
    "disk quota nearly full",
    "retrying upstream call",
    "cache miss storm",
    "worker restarted",
]

UNKNOWN_LINES = [
    "X blblbaaaaa",
    "-- log rotated --",
    "stack trace follows",
]


def make_line(rng: random.Random, timestamp: int) -> str:
    log_type = rng.choice(["I", "W", "E", "E", "?", ""])
    msg = rng.choice(MESSAGES)

    if log_type == "I":
        return f"I,{timestamp},{msg}"
    if log_type == "W":
        return f"W,{timestamp},{msg}"
    if log_type == "E":
        return f"E,{rng.randint(1, 99)},{timestamp},{msg}"
    if log_type == "?":
        return rng.choice(UNKNOWN_LINES)
    return ""


def generate_logs(filename="sample.log", target_lines=1000, seed=None):
    rng = random.Random(seed)
    timestamp = 100

    with open(filename, "w", encoding="utf-8") as f:
        for _ in range(target_lines):
            # Simple jump in time
            timestamp += rng.randint(1, 15)
            f.write(make_line(rng, timestamp) + "\n")

    return filename


if __name__ == "__main__":
    path = generate_logs()
    print(f"Generated logs in {path}")
