from .errors import EmptyInputError
from .heap import PriorityQueue


### HUFFMAN NODE CLASSES ###
class Leaf:
    """A symbol together with how often it occurs."""
    __slots__ = ("symbol", "frequency")

    def __init__(self, symbol, frequency):
        self.symbol = symbol
        self.frequency = frequency

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.frequency})"


class Internal:
    """
    Merged node. Owns its two children; its frequency is their sum.
    `right` is None only for the wrapper built around a lone symbol.
    """
    __slots__ = ("frequency", "left", "right")

    def __init__(self, frequency, left, right=None):
        self.frequency = frequency
        self.left = left
        self.right = right

    def __repr__(self):
        return f"Internal({self.frequency}, {self.left!r}, {self.right!r})"


### TREE CONSTRUCTION ###
def build_tree(frequency):
    """
    Builds the Huffman tree for a frequency table (symbol -> count).

    Leaves enter the queue in ascending symbol order and the queue breaks ties
    by insertion order, so the same table always gives the same tree.
    """
    if not frequency:
        raise EmptyInputError("Cannot build a Huffman tree without symbols")

    queue = PriorityQueue()
    for symbol in sorted(frequency):
        count = frequency[symbol]
        if count <= 0:
            raise ValueError(f"Frequency of symbol {symbol} must be positive, got {count}")
        queue.insert(Leaf(symbol, count))

    # A lone leaf would get an empty code; wrap it so its code is "0"
    if len(queue) == 1:
        only = queue.extract_min()
        return Internal(only.frequency, only)

    while len(queue) > 1:
        first = queue.extract_min()
        second = queue.extract_min()
        queue.insert(Internal(first.frequency + second.frequency, first, second))

    return queue.extract_min()


def tree_depth(node):
    """Length of the longest root-to-leaf path."""
    if node is None or isinstance(node, Leaf):
        return 0
    return 1 + max(tree_depth(node.left), tree_depth(node.right))
