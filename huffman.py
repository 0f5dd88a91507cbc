import heapq
import math


class HuffmanError(ValueError):
    """Base class for everything the Huffman engine raises."""


class EmptyAlphabetError(HuffmanError):
    pass


class EncodeError(HuffmanError, KeyError):
    __str__ = Exception.__str__ # KeyError would quote the message


class DecodeError(HuffmanError):
    pass


class HuffmanNode: # Node for Huffman tree
    def __init__(self, symbol, frequency, left=None, right=None):
        self.symbol = symbol    # input symbol, None for internal nodes
        self.frequency = frequency
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        # structural check, so None or 0 are still usable as symbols
        return self.left is None and self.right is None

    def __lt__(self, other):
        return self.frequency < other.frequency # allows heapq to maintain the min-heap property based on frequency

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.frequency})"
        return f"HuffmanNode(<internal>, {self.frequency})"


def frequency_table(data) -> dict: # data: any finite sequence of hashable symbols (bytes, str, list)
    ft = {}
    for symbol in data:
        ft[symbol] = ft.get(symbol, 0) + 1
    return ft


def build_huffman_tree(frequency_table): # frequency_table: dict of symbol -> frequency
    if not frequency_table:
        raise EmptyAlphabetError("cannot build a Huffman tree for an empty alphabet")

    priority_queue = [HuffmanNode(symbol, frequency) for symbol, frequency in frequency_table.items()]

    # One symbol: hang the lone leaf off the left of an internal root so it gets code "0"
    if len(priority_queue) == 1:
        only = priority_queue[0]
        return HuffmanNode(None, only.frequency, left=only)

    heapq.heapify(priority_queue)

    # Build the tree
    while len(priority_queue) > 1:
        left = heapq.heappop(priority_queue)
        right = heapq.heappop(priority_queue)
        merged_node = HuffmanNode(None, left.frequency + right.frequency, left, right) # internal node with combined frequency
        heapq.heappush(priority_queue, merged_node) # add the merged node back to the priority queue

    return priority_queue[0] # root of the tree


def generate_huffman_codes(root): # root: root of the Huffman tree
    if root.is_leaf:
        # bare leaf as root (tree not made by build_huffman_tree), an empty code is undecodable
        return {root.symbol: '0'}

    codes = {}
    # explicit stack instead of recursion, a skewed tree can be as deep as the alphabet is large
    stack = [(root, '')]
    while stack:
        node, current_code = stack.pop()
        if node is None:
            continue

        # Leaf node -> assign code
        if node.is_leaf:
            codes[node.symbol] = current_code
            continue

        stack.append((node.right, current_code + '1'))
        stack.append((node.left, current_code + '0'))

    return codes # return the mapping of symbols to their corresponding Huffman codes


def leaf_symbols(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node.is_leaf:
            yield node.symbol
        else:
            stack.append(node.right)
            stack.append(node.left)


def default_joiner(root):
    # container for huffman_decode when the caller gives none, chosen from the symbols in the tree
    symbols = list(leaf_symbols(root))
    if all(isinstance(s, int) and not isinstance(s, bool) and 0 <= s < 256 for s in symbols):
        return bytes
    if all(isinstance(s, str) for s in symbols):
        return ''.join
    return list


def huffman_encode(data, code_map: dict) -> str: # data: input sequence to encode, code_map: dict of symbol -> Huffman code
    try:
        return ''.join(code_map[symbol] for symbol in data)
    except KeyError as exc:
        raise EncodeError(f"no Huffman code for symbol {exc.args[0]!r}") from exc


def huffman_decode(bitstring: str, root, joiner=None):
    """
    Walk the tree once per code: '0' goes left, '1' goes right, a leaf emits its
    symbol and resets the cursor to the root.

    joiner builds the result from the list of decoded symbols. When omitted it is
    picked from the tree: bytes if every symbol is a byte value, "".join if every
    symbol is a str, list otherwise.
    Raises DecodeError if the stream does not belong to this tree or stops mid-code.
    """
    if joiner is None:
        joiner = default_joiner(root)
    decoded_symbols = []

    if root.is_leaf:
        for position, bit in enumerate(bitstring):
            if bit != '0':
                raise DecodeError(f"invalid bit {bit!r} at position {position} for a single-symbol tree")
            decoded_symbols.append(root.symbol)
        return joiner(decoded_symbols)

    current_node = root
    for position, bit in enumerate(bitstring):
        if bit == '0':
            current_node = current_node.left
        elif bit == '1':
            current_node = current_node.right
        else:
            raise DecodeError(f"invalid character {bit!r} at position {position}, expected '0' or '1'")

        if current_node is None:
            raise DecodeError(f"bit {position} leads off the tree, stream was not encoded with this tree")

        if current_node.is_leaf: # reached a leaf
            decoded_symbols.append(current_node.symbol)
            current_node = root # reset to the root for the next symbol

    if current_node is not root:
        raise DecodeError(f"stream ended mid-code after {len(bitstring)} bits")

    return joiner(decoded_symbols) # return the decoded sequence after traversing the bitstring through the Huffman tree


def code_lengths(code_map: dict) -> dict:
    return {symbol: len(code) for symbol, code in code_map.items()}


def encoded_length(code_map: dict, frequency_table: dict) -> int:
    # weighted path length: number of bits huffman_encode would produce
    return sum(len(code_map[symbol]) * count for symbol, count in frequency_table.items())


def fixed_width_length(frequency_table: dict) -> int:
    width = max(1, math.ceil(math.log2(len(frequency_table)))) if frequency_table else 0
    return width * sum(frequency_table.values())
