# main.py
import sys

from navgraph.app.demo import format_report, run_query, sample_graph


def run(pairs: list[tuple[str, str]], repeat: int = 1):
    g = sample_graph()
    for a, b in pairs:
        for line in format_report(run_query(g, a, b, repeat=repeat)):
            print(line)


if __name__ == "__main__":
    # python main.py [repeat]
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    run([("A", "E"), ("G", "E"), ("A", "A")], repeat=n)
