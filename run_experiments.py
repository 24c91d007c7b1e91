#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    # 8-puzzle; dfs and id-dfs take far longer here
    run("python -m npuzzle.experiments.benchmark --algorithms bfs a-star id-a-star "
        "--pieces 7,8,5,3,1,4,6,2 --x-blank 0 --y-blank 2 --runs 3 --out results/p8.csv")
    # 15-puzzle, informed searches only
    run("python -m npuzzle.experiments.benchmark --algorithms a-star id-a-star --runs 3 --out results/p15.csv")
    run("python -m npuzzle.experiments.summarize results/p8.csv --plot results/p8_time.png")
    run("python -m npuzzle.experiments.summarize results/p15.csv --plot results/p15_time.png")

if __name__ == "__main__":
    main()
