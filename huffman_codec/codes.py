from .tree import Leaf


def generate_codes(root):
    """
    Walks the tree depth-first: left adds '0', right adds '1'.
    Returns a dict of symbol -> bitstring, one entry per leaf.
    """
    codes = {}

    def generate_codes_helper(node, current_code):
        if node is None:
            return

        # Leaf node -> assign code
        if isinstance(node, Leaf):
            codes[node.symbol] = current_code
            return

        generate_codes_helper(node.left, current_code + "0")
        generate_codes_helper(node.right, current_code + "1")

    generate_codes_helper(root, "")
    return codes


def is_prefix_free(codes):
    # After sorting, a code that prefixes another sorts directly before one it prefixes
    ordered = sorted(codes.values())
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))
