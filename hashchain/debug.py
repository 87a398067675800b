from .shared import printf
from .table import HashMap


def dump_table(table: HashMap, name: str):
    printf("== {0:s} ==\n", name)

    used = 0
    for index in range(table.capacity):
        if table.buckets[index] is None:
            continue
        used += 1
        dump_bucket(table, index)

    printf("size {0:d}/{1:d}, {2:d} buckets used\n", len(table), table.capacity, used)


def dump_bucket(table: HashMap, index: int):
    printf("{0:04d} ", index)
    if table.buckets[index] is None:
        printf("(empty)\n")
        return

    printf(
        "{0:s}\n",
        " -> ".join(f"{entry.key}={entry.value}" for entry in table.chain(index)),
    )
