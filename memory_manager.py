class PhysicalMemory:
    def __init__(self, num_frames):
        self.num_frames = num_frames
        # Each frame stores the resident page number or None if free
        self.frames = [None] * num_frames
        self.frame_of = {}  # page_num -> frame_num
        # Frames are handed out in order until memory first fills up
        self.next_free = 0

    def find_free_frame(self):
        if self.next_free < self.num_frames:
            return self.next_free
        return None

    def allocate_frame(self, frame_num, page_num):
        self.frames[frame_num] = page_num
        self.frame_of[page_num] = frame_num
        if frame_num == self.next_free:
            self.next_free += 1

    def free_frame(self, page_num):
        frame_num = self.frame_of.pop(page_num)
        self.frames[frame_num] = None
        return frame_num

    def snapshot(self):
        return [(frame_num, page_num)
                for frame_num, page_num in enumerate(self.frames)
                if page_num is not None]


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.hits = 0
        self.evictions = 0

    def record_page_fault(self, evicted=False):
        self.page_faults += 1
        if evicted:
            self.evictions += 1

    def record_hit(self):
        self.hits += 1

    @property
    def references(self):
        return self.page_faults + self.hits

    @property
    def hit_ratio(self):
        if self.references == 0:
            return 0.0
        return self.hits / self.references

    def __str__(self):
        return (f"References: {self.references}\n"
                f"Page Faults: {self.page_faults}\n"
                f"Hits: {self.hits}\n"
                f"Evictions: {self.evictions}\n"
                f"Hit Ratio: {self.hit_ratio:.4f}")
