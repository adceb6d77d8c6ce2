import heapq
from itertools import count


class PriorityQueue:
    """
    Min-heap of tree nodes keyed by node frequency.

    Ties are stable: when two nodes have the same frequency, the one inserted
    first is extracted first. Encoder and decoder both rebuild the tree from
    the frequency table alone, so this order has to be fully determined.
    """

    def __init__(self):
        self._heap = []  # (frequency, insertion sequence, node)
        self._sequence = count()

    def __len__(self):
        return len(self._heap)

    def insert(self, node):
        heapq.heappush(self._heap, (node.frequency, next(self._sequence), node))

    def extract_min(self):
        if not self._heap:
            raise IndexError("extract_min from an empty priority queue")
        return heapq.heappop(self._heap)[2]
