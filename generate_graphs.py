import sys

import matplotlib.pyplot as plt
from simulator import LRUSimulator, read_input

DEFAULT_DATA_FILES = ['data1.txt', 'data2.txt']
OUTPUT_FILE = 'lru_capacity_sweep.png'


def sweep_capacities(references, max_frames=None):
    if max_frames is None:
        max_frames = max(len(set(references)), 1)

    results = {}
    for num_frames in range(1, max_frames + 1):
        simulator = LRUSimulator(num_frames)
        for _ in simulator.simulate(references):
            pass
        results[num_frames] = simulator.stats
    return results


def main(data_files=None):
    data_files = data_files or DEFAULT_DATA_FILES
    results = {}
    configured = {}

    print("Running simulations...")
    for data_file in data_files:
        with open(data_file, 'r') as f:
            num_frames, references = read_input(f)
        configured[data_file] = num_frames
        results[data_file] = sweep_capacities(references, max(num_frames, len(set(references)), 1))
        print(f"\n{data_file} with {num_frames} frames:")
        print(results[data_file][num_frames])

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle('LRU Page Faults by Frame Count', fontsize=14, fontweight='bold')

    metrics = ['page_faults', 'hit_ratio']
    titles = ['Page Faults', 'Hit Ratio']

    for ax, metric, title in zip(axes, metrics, titles):
        for data_file in data_files:
            sweep = results[data_file]
            x = list(sweep)
            y = [getattr(sweep[n], metric) for n in x]
            line, = ax.plot(x, y, marker='o', markersize=3, label=data_file)

            n = configured[data_file]
            ax.scatter([n], [getattr(sweep[n], metric)], color=line.get_color(),
                       s=60, zorder=3, edgecolors='black')

        ax.set_title(title)
        ax.set_xlabel('Frames')
        ax.grid(alpha=0.3)

    axes[0].legend(loc='upper right', frameon=True)

    plt.tight_layout()
    plt.savefig(OUTPUT_FILE, dpi=300, bbox_inches='tight')
    print(f"\nGraph saved as '{OUTPUT_FILE}'")
    plt.show()


if __name__ == '__main__':
    main(sys.argv[1:])
