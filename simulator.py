import re
import sys

from page_table import PageTable
from memory_manager import PhysicalMemory, Statistics


FRAMES_KEYWORD = 'Frames'
HEADER = 'Page replacement using LRU'
INPUT_FORMAT_ERROR = f"Error: Invalid input format. Expected '{FRAMES_KEYWORD} [number]'"
# Optionally signed decimal digits, nothing else
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class ConfigurationError(ValueError):
    pass


class StepResult:
    def __init__(self, index, page_num, is_hit, evicted_page, frames):
        self.index = index
        self.page_num = page_num
        self.is_hit = is_hit
        self.evicted_page = evicted_page
        self.frames = frames  # [(frame_num, page_num)] for occupied frames

    @property
    def pages(self):
        return [page_num for _, page_num in self.frames]

    def __repr__(self):
        outcome = 'hit' if self.is_hit else 'fault'
        if self.evicted_page is not None:
            outcome += f", evict {self.evicted_page}"
        return f"<StepResult {self.index}: ref {self.page_num} {outcome} frames={self.pages}>"


class LRUSimulator:

    def __init__(self, num_frames):
        if isinstance(num_frames, bool) or not isinstance(num_frames, int) or num_frames < 1:
            raise ConfigurationError(f"Frame count must be a positive integer, got {num_frames!r}")
        self.num_frames = num_frames
        self.physical_memory = PhysicalMemory(num_frames=num_frames)
        self.page_table = PageTable()
        self.stats = Statistics()
        self.current_time = 0

    def handle_memory_reference(self, page_num):
        index = self.current_time
        self.current_time += 1

        evicted_page = None
        if page_num in self.page_table:
            # Page hit - promote to MRU, frames stay where they are
            self.page_table.move_to_front(page_num)
            self.stats.record_hit()
            is_hit = True
        else:
            evicted_page = self.handle_page_fault(page_num)
            is_hit = False

        return StepResult(index, page_num, is_hit, evicted_page,
                          self.physical_memory.snapshot())

    def handle_page_fault(self, page_num):
        frame_num = self.physical_memory.find_free_frame()
        evicted_page = None

        if frame_num is None:
            evicted_page, frame_num = self.select_victim_lru()

        self.stats.record_page_fault(evicted=evicted_page is not None)
        self.physical_memory.allocate_frame(frame_num, page_num)
        self.page_table.push_front(page_num)
        return evicted_page

    def select_victim_lru(self):
        # The back of the recency list is the unique LRU page
        return self.evict_page(self.page_table.lru_page())

    def evict_page(self, page_num):
        self.page_table.remove(page_num)
        frame_num = self.physical_memory.free_frame(page_num)
        return page_num, frame_num

    def simulate(self, references):
        for page_num in references:
            yield self.handle_memory_reference(page_num)


def simulate(num_frames, references):
    """
    Run LRU over references with num_frames frames, yielding one StepResult
    per reference. Raises ConfigurationError immediately for a bad frame
    count, before the first step is requested.
    """
    return LRUSimulator(num_frames).simulate(references)


def read_input(stream):
    """
    Parse 'Frames <n>' followed by whitespace-separated page numbers.
    Reading of references stops at the first token that is not an integer.
    """
    tokens = stream.read().split()
    if len(tokens) < 2 or tokens[0] != FRAMES_KEYWORD:
        raise ConfigurationError(INPUT_FORMAT_ERROR)
    if not INTEGER_TOKEN.fullmatch(tokens[1]):
        raise ConfigurationError(INPUT_FORMAT_ERROR)
    num_frames = int(tokens[1])
    if num_frames < 1:
        raise ConfigurationError(INPUT_FORMAT_ERROR)

    references = []
    for token in tokens[2:]:
        if not INTEGER_TOKEN.fullmatch(token):
            break
        references.append(int(token))
    return num_frames, references


def format_references(references):
    return ' '.join(str(p) for p in references)


def format_step(step):
    return f"time step {step.index}: " + ' '.join(str(p) for p in step.pages)


def format_total(stats):
    return f"total number of page faults = {stats.page_faults}"


def run_simulation(stream, out=None):
    if out is None:
        out = sys.stdout

    num_frames, references = read_input(stream)
    simulator = LRUSimulator(num_frames)

    print(format_references(references), file=out)
    print(HEADER, file=out)
    for step in simulator.simulate(references):
        print(format_step(step), file=out)
    print(format_total(simulator.stats), file=out)

    return simulator.stats


def main():
    try:
        run_simulation(sys.stdin, sys.stdout)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
