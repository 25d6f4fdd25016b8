"""Command that reads a graph, prints longest paths and writes a DOT file."""

from __future__ import annotations

import shutil
import subprocess
import sys
import time

from dslabs.graphs.graph import GraphInputError, parse_graph
from dslabs.search.fileio import file_size

RED = "\033[31m"
YELLOW = "\x1b[33m"
RESET = "\033[0m"

DOT_FILE = "graphviz.txt"
DOT_NAME = "Test_graph"

# Byte sizes of the structures whose memory use is reported.
_INT_SIZE = 4
_GRAPH_HEADER_SIZE = 16
_POINTER_SIZE = 8
_ADJ_NODE_SIZE = 8
_LABELS_INITIAL = 10


def _banner() -> None:
    figlet = shutil.which("figlet")
    if figlet is None:
        return
    try:
        subprocess.run([figlet, "-f", "slant", "Graphs"], check=False)
    except OSError:
        pass


def _labels_allocated(count: int) -> int:
    allocated = _LABELS_INITIAL
    while allocated <= count:
        allocated *= 2
    return allocated


def _memory(vertices: int) -> int:
    return (
        _labels_allocated(vertices) * _INT_SIZE
        + _GRAPH_HEADER_SIZE
        + _POINTER_SIZE * vertices
        + _ADJ_NODE_SIZE * vertices // 2
    )


def main(argv=None) -> int:
    """Analyse the graph in the file named by the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    _banner()

    bad_path = f"{RED}Ошибка, неправильный путь к файлу.\n{RESET}"
    if not args:
        out.write(bad_path)
        return 1
    try:
        stream = open(args[0], encoding="utf-8")
    except OSError:
        out.write(bad_path)
        return 1

    with stream:
        if file_size(stream) == 0:
            out.write(f"{RED}Ошибка, пустой файл.\n{RESET}")
            return 1
        try:
            graph = parse_graph(stream)
        except GraphInputError as error:
            out.write(f"{RED}{error}\n{RESET}")
            return 1

    start = time.process_time_ns()
    for vertex in range(graph.vertex_count):
        out.write(graph.format_longest_paths(vertex))
    elapsed = time.process_time_ns() - start

    seconds, nanos = divmod(elapsed, 1_000_000_000)
    out.write(f"\n\n{YELLOW}Время поиска{RESET} {seconds}s {nanos}ns\n")
    out.write(f"{YELLOW}Памяти потребовалось: {RESET}{_memory(graph.vertex_count)}Б\n")

    with open(DOT_FILE, "w", encoding="utf-8") as dot:
        dot.write(graph.to_dot(DOT_NAME))
    return 0