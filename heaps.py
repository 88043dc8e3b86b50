import os
import csv
import sys
import time
import numpy as np
import pandas as pd

from heap_sort import heap_sort
from logger import configure, print_, error_
from median import MedianTracker, median_sliding_window
from merge import merge_k_sorted
from top_k import top_k, top_k_frequent

INPUT_FILENAME = "heaps_input.txt"


class HeapsParams:
    def __init__(self):
        self.n_values = 0
        self.value_min = 0
        self.value_max = 0
        self.seed = None
        self.k = 0
        self.n_sources = 1
        self.window = 1
        self.values_from_file = 0
        self.values_filename = ""


def read_input(params, input_filename=INPUT_FILENAME):
    try:
        with open(input_filename, "r") as input_file:
            for line in input_file:
                if not line.strip():
                    continue
                parameter, value = line.strip().split("=")
                parameter = parameter.strip()
                value = value.strip()

                if parameter == "generate_values_from_file":
                    params.values_from_file = 1 if value == "true" else 0
                elif parameter == "values_filename":
                    params.values_filename = value
                elif parameter == "n_values":
                    params.n_values = int(value)
                elif parameter == "value_min":
                    params.value_min = int(value)
                elif parameter == "value_max":
                    params.value_max = int(value)
                elif parameter == "seed":
                    params.seed = int(value)
                elif parameter == "k":
                    params.k = int(value)
                elif parameter == "n_sources":
                    params.n_sources = int(value)
                elif parameter == "window":
                    params.window = int(value)
                else:
                    raise ValueError(f"Unknown parameter {parameter}")
    except FileNotFoundError:
        raise RuntimeError(f"cannot open file <{input_filename}>.")


def generate_values(params, random_generator):
    """Draw n_values integers uniformly from [value_min, value_max]."""
    values = random_generator.integers(params.value_min, params.value_max, size=params.n_values, endpoint=True)
    return [int(value) for value in values]


def read_values(params):
    """Read the `value` column of a CSV file."""
    try:
        values_df = pd.read_csv(params.values_filename)
    except FileNotFoundError:
        raise RuntimeError(f"File '{params.values_filename}' not found.")
    if "value" not in values_df.columns:
        raise RuntimeError(f"File '{params.values_filename}' has no 'value' column.")
    return values_df["value"].tolist()


def initialize_values(params):
    if params.values_from_file:
        return read_values(params)
    return generate_values(params, np.random.default_rng(params.seed))


def split_into_sorted_sources(values, n_sources):
    """Deal values round-robin into n_sources lists and sort each one."""
    n_sources = max(n_sources, 1)
    sources = [values[i::n_sources] for i in range(n_sources)]
    for source in sources:
        heap_sort(source)
    return sources


def write_output(results, output_dir_name):
    if not os.path.exists(output_dir_name):
        print_("heaps.py: Cannot find the output directory. The output will be stored in the current directory.")
        output_dir_name = "./"

    with open(os.path.join(output_dir_name, "sorted_output.csv"), "w", newline='') as csv_sorted_output:
        writer = csv.writer(csv_sorted_output)
        writer.writerow(["position", "value"])
        for position, value in enumerate(results["sorted"]):
            writer.writerow([position, value])

    with open(os.path.join(output_dir_name, "top_k_output.csv"), "w", newline='') as csv_top_k_output:
        writer = csv.writer(csv_top_k_output)
        writer.writerow(["selection", "rank", "value"])
        for selection in ("largest", "smallest", "frequent"):
            for rank, value in enumerate(results[selection], start=1):
                writer.writerow([selection, rank, value])

    with open(os.path.join(output_dir_name, "merge_output.csv"), "w", newline='') as csv_merge_output:
        writer = csv.writer(csv_merge_output)
        writer.writerow(["position", "value"])
        for position, value in enumerate(results["merged"]):
            writer.writerow([position, value])

    with open(os.path.join(output_dir_name, "medians_output.csv"), "w", newline='') as csv_medians_output:
        writer = csv.writer(csv_medians_output)
        writer.writerow(["count", "value", "median"])
        for count, (value, median) in enumerate(zip(results["values"], results["medians"]), start=1):
            writer.writerow([count, value, median])

    with open(os.path.join(output_dir_name, "window_medians_output.csv"), "w", newline='') as csv_window_output:
        writer = csv.writer(csv_window_output)
        writer.writerow(["window_start", "median"])
        for start, median in enumerate(results["window_medians"]):
            writer.writerow([start, median])


def run_algorithms(values, params):
    results = {"values": values}

    begin = time.time()
    sorted_values = list(values)
    heap_sort(sorted_values)
    results["sorted"] = sorted_values
    print_(f"Heap sort of {len(values)} values: {time.time() - begin:.4f} s")

    begin = time.time()
    results["largest"] = top_k(values, params.k, select_largest=True)
    results["smallest"] = top_k(values, params.k, select_largest=False)
    results["frequent"] = top_k_frequent(values, params.k)
    print_(f"Top-{params.k} selections: {time.time() - begin:.4f} s")

    begin = time.time()
    sources = split_into_sorted_sources(values, params.n_sources)
    results["merged"] = merge_k_sorted(sources)
    print_(f"Merge of {len(sources)} sorted sources: {time.time() - begin:.4f} s")

    begin = time.time()
    tracker = MedianTracker()
    medians = []
    for value in values:
        tracker.add_num(value)
        medians.append(tracker.find_median())
    results["medians"] = medians
    results["window_medians"] = median_sliding_window(values, params.window)
    print_(f"Running and window medians: {time.time() - begin:.4f} s")

    return results


def main(argv):
    configure()
    if len(argv) < 2:
        error_("heaps.py: please specify the output directory")
        return -1

    output_dir_name = argv[1]
    input_filename = argv[2] if len(argv) > 2 else INPUT_FILENAME
    params = HeapsParams()
    try:
        read_input(params, input_filename)
        print_("VALUES INITIALIZATION")
        values = initialize_values(params)
        print_("EXECUTION OF THE ALGORITHMS")
        results = run_algorithms(values, params)
    except (RuntimeError, ValueError) as e:
        error_(f"heaps.py: {e}")
        return -1

    write_output(results, output_dir_name)
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
