from errors import CapacityExceededError


class Array:
    def __init__(self, size, fixed=False):
        self.size = max(size, 1)
        self.index = 0
        self.fixed = fixed
        self.elements = [None] * self.size

    def _resize(self):
        if self.fixed:
            raise CapacityExceededError(f"Array is full (capacity {self.size})")
        self.size *= 2
        self.elements.extend([None] * (self.size - len(self.elements)))

    def insert(self, data):
        if self.index >= self.size:
            self._resize()
        self.elements[self.index] = data
        self.index += 1

    def get(self, i):
        if i >= self.size or i >= self.index:
            return None
        return self.elements[i]

    def pop(self):
        """Remove and return the last element."""
        if self.index == 0:
            raise IndexError("pop from empty Array")
        self.index -= 1
        data = self.elements[self.index]
        self.elements[self.index] = None
        return data

    def swap(self, i, j):
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def length(self):
        return self.index

    def to_list(self):
        return self.elements[:self.index]

    def delete_all(self):
        self.elements = [None] * self.size
        self.index = 0

    # Sequence protocol, so the sift helpers in heap_ work on an Array too
    def __len__(self):
        return self.index

    def __getitem__(self, i):
        if not 0 <= i < self.index:
            raise IndexError(f"Array index {i} out of range")
        return self.elements[i]

    def __setitem__(self, i, data):
        if not 0 <= i < self.index:
            raise IndexError(f"Array index {i} out of range")
        self.elements[i] = data
