from config import MAX_HISTORY


class HistoryRing:
    """
    Past command lines, newest first.

    Slot 0 is always the empty string: it stands for the line being edited
    when nothing has been recalled. Real entries start at index 1 and the
    oldest one is dropped once there are more than `limit` of them.
    """

    def __init__(self, limit=MAX_HISTORY):
        self.limit = limit
        self.entries = [""]
        self.position = 0

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def add(self, line):
        """Record a submitted line and move the cursor back to the live slot"""
        self.position = 0
        self.entries.insert(1, line)
        if len(self.entries) > self.limit + 1:
            self.entries.pop()

    def older(self):
        """
        Step towards older entries.
        Returns the recalled text, or None when already at the oldest entry.
        """
        if self.position >= len(self.entries) - 1:
            return None
        self.position += 1
        return self.entries[self.position]

    def newer(self):
        """
        Step towards the live slot.
        Returns the recalled text, or None when already at the live slot.
        """
        if self.position <= 0:
            return None
        self.position -= 1
        return self.entries[self.position]
