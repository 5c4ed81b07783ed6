import time
import argparse
import numpy as np


def parse_args(description):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", help="config yaml file")
    parser.add_argument("--log_level", default="info", help="logging level")
    parser.add_argument("--log_filename", default="log.txt",
                        help="log file under output dir")
    parser.add_argument("--no_log_stdout", action="store_true",
                        help="do not log to stdout")
    return parser.parse_args()


class Timer:

    def __init__(self):
        self.t = time.perf_counter()

    def start(self):
        self.t = time.perf_counter()

    def elapsed(self):
        return time.perf_counter() - self.t

    def fetch_restart(self):
        diff = self.elapsed()
        self.start()
        return diff


class Benchmark:
    """Collects the durations of named calls and formats them as a table."""

    def __init__(self):
        self.timer = Timer()
        self.calls = {}

    def restart_timer(self):
        self.timer.start()

    def register_call(self, callname):
        self.calls.setdefault(callname, []).append(self.timer.fetch_restart())

    def reset(self):
        self.timer.start()
        self.calls = {}

    def total(self, callname):
        return float(np.sum(self.calls.get(callname, [])))

    def get_benchmark(self, unit="ms", precision=4):
        multip = 1000 if unit == "ms" else 1
        header = ["name", "calls", "min", "mean", "max", "total"]
        mxwidth = [len(x) for x in header]
        records = [header]
        for k, times in self.calls.items():
            times = np.array(times) * multip
            record = [k, str(len(times))]
            for x in [times.min(), times.mean(), times.max(), times.sum()]:
                record.append(str(round(x, precision)))
            records.append(record)
            for i, x in enumerate(record):
                mxwidth[i] = max(mxwidth[i], len(x))
        lines = []
        for record in records:
            line = f"{record[0].ljust(mxwidth[0])} " + " ".join([x.center(w)
                                                                 for x, w in zip(record[1:], mxwidth[1:])])
            lines.append(line)
        sepline = "-" * (sum(mxwidth) + len(mxwidth))
        return "\n".join([lines[0], sepline] + lines[1:] + [sepline])
