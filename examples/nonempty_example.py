import logging

from nonempty import NonEmptyError, concat, display, nonempty, read, write

logging.basicConfig(
    format="[{asctime}] [{levelname:<8}] {name}: {message}",
    datefmt="%Y-%m-%d %H:%M:%S",
    style="{",
    level=logging.DEBUG,
)

paths = nonempty(["path/to/data", "path/to/cache"])
print(display(paths))

paths = concat(paths, ["path/to/logs"])
print(display(read(paths, [0, 2])))

try:
    write(paths, slice(None), "")
except NonEmptyError as e:
    print(e)

print(display(paths))
