import logging

from nonempty import Config, NonEmptyError, nonempty

logging.basicConfig(
    format="[{asctime}] [{levelname:<8}] {name}: {message}",
    datefmt="%Y-%m-%d %H:%M:%S",
    style="{",
    level=logging.INFO,
)

# whitespace counts as content when stripping is disabled
print(nonempty("   ", config=Config(strip=False)))

try:
    nonempty("---", config=Config(strip_chars="-"))
except NonEmptyError as e:
    print(e)
