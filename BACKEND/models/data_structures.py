"""
Custom Data Structures for the Esports Management Platform
Built ENTIRELY from scratch — no external libraries used for core logic.

This module contains hand-built implementations of:
1. MinHeap  — Binary min-heap backing leaderboard ranking
2. Queue    — Linked-list-based FIFO queue (BFS work queue)
3. Trie     — Prefix tree for player/username autocomplete
4. Graph    — Undirected adjacency-list graph with breadth-first traversal

None of these structures are safe for unsynchronized concurrent mutation;
callers sharing an instance across requests must lock around it.

Author: Esports Platform Team
"""


# ============================================================================
# 1. MIN HEAP — Binary Min-Heap (Array-based)
# ============================================================================

class MinHeap:
    """
    Binary Min-Heap built from scratch using a flat array.

    How it works:
    - Stored as a flat array where for element at index i:
      - Parent is at (i-1) // 2
      - Left child is at 2i + 1
      - Right child is at 2i + 2
    - Min-heap property: every child key >= its parent key
    - Each slot holds a (key, value) pair; only keys are compared, so
      values may be records that do not define an ordering

    The leaderboard gets descending order out of this structure by
    inserting the negated rating as the key and negating it back on
    extraction.

    Time Complexity:
    - insert:      O(log n)
    - extract_min: O(log n)
    - peek:        O(1)
    """

    def __init__(self, key=None):
        """
        Initialize an empty MinHeap.

        Args:
            key (callable): Maps a value to its comparison key.
                            Defaults to the value itself.
        """
        self._heap = []
        self._key = key if key is not None else (lambda value: value)

    def _swap(self, i, j):
        """Swap two elements in the heap array."""
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _heapify_up(self, index):
        """Bubble element UP while its parent's key is strictly greater."""
        while index > 0:
            parent = (index - 1) // 2
            if self._heap[parent][0] > self._heap[index][0]:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _heapify_down(self, index):
        """Sink element DOWN into the subtree of its smaller child."""
        size = len(self._heap)
        smallest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and self._heap[left][0] < self._heap[smallest][0]:
            smallest = left
        if right < size and self._heap[right][0] < self._heap[smallest][0]:
            smallest = right
        if smallest != index:
            self._swap(index, smallest)
            self._heapify_down(smallest)

    def insert(self, value):
        """Insert a value into the heap, keyed by the heap's key function."""
        self._heap.append((self._key(value), value))
        self._heapify_up(len(self._heap) - 1)

    def extract_min(self):
        """
        Remove and return the value with the smallest key.

        Returns:
            The minimum value, or None when the heap is empty.
        """
        if not self._heap:
            return None
        if len(self._heap) == 1:
            return self._heap.pop()[1]

        root = self._heap[0][1]
        self._heap[0] = self._heap.pop()
        self._heapify_down(0)
        return root

    def peek(self):
        """Return the minimum value without removing it (None when empty)."""
        if not self._heap:
            return None
        return self._heap[0][1]

    def size(self):
        """Return the number of elements."""
        return len(self._heap)

    def is_empty(self):
        """Check if the heap is empty."""
        return len(self._heap) == 0

    def keys(self):
        """Return the stored keys in array (heap) order."""
        return [entry[0] for entry in self._heap]

    @staticmethod
    def nsmallest(n, iterable, key=None):
        """
        Return the n smallest elements from iterable using a MinHeap.

        Algorithm:
        1. Insert all items into a MinHeap keyed by `key`
        2. Extract the minimum element n times
        """
        heap = MinHeap(key=key)
        for item in iterable:
            heap.insert(item)
        result = []
        for _ in range(min(n, heap.size())):
            result.append(heap.extract_min())
        return result

    def __len__(self):
        return len(self._heap)

    def __repr__(self):
        return f'MinHeap(size={len(self._heap)})'


# ============================================================================
# 2. QUEUE — Linked-List-based FIFO Queue
# ============================================================================

class _QueueNode:
    """Internal node for the linked-list-based Queue."""
    def __init__(self, value):
        self.value = value
        self.next = None


class Queue:
    """
    FIFO Queue built from scratch using a singly linked list.

    Used as the frontier of Graph.bfs.

    Time Complexity: O(1) for enqueue and dequeue
    """

    def __init__(self):
        """Initialize an empty Queue."""
        self._front = None
        self._rear = None
        self._size = 0

    def enqueue(self, value):
        """Add an element to the rear of the queue."""
        new_node = _QueueNode(value)
        if self._rear is None:
            self._front = new_node
            self._rear = new_node
        else:
            self._rear.next = new_node
            self._rear = new_node
        self._size += 1

    def dequeue(self):
        """Remove and return the element at the front."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        value = self._front.value
        self._front = self._front.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return value

    def is_empty(self):
        """Check if the queue is empty."""
        return self._front is None

    def __len__(self):
        return self._size


# ============================================================================
# 3. TRIE — Prefix Tree for Username Search
# ============================================================================

class _TrieNode:
    """
    Internal node for the Trie (Prefix Tree).
    - children: char -> _TrieNode, owned by this node
    - is_end: whether the path to this node spells a stored word
    """
    def __init__(self):
        self.children = {}
        self.is_end = False


class Trie:
    """
    Trie (Prefix Tree) built from scratch for username autocomplete.

    How it works:
    - Each node represents a single character
    - Words are stored character-by-character along paths from root
    - Nodes are created lazily the first time a path passes through them
    - Prefix search walks to the prefix node, then collects every word below

    Matching is case-sensitive and there is no deletion; the trie only grows.

    Time Complexity:
    - insert: O(L) where L is word length
    - search: O(P + K) where P is prefix length, K is total length of matches
    """

    def __init__(self):
        """Initialize an empty Trie with a root node."""
        self.root = _TrieNode()
        self._word_count = 0

    def _walk(self, fragment):
        """Follow `fragment` from the root; None if the path breaks off."""
        node = self.root
        for char in fragment:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word):
        """
        Insert a word into the Trie. Inserting the same word twice is a no-op.
        The empty string marks the root itself as a stored word.
        """
        node = self.root
        for char in word:
            if char not in node.children:
                node.children[char] = _TrieNode()
            node = node.children[char]

        if not node.is_end:
            node.is_end = True
            self._word_count += 1

    def contains(self, word):
        """Check if an exact word is stored in the Trie."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix):
        """Check if any stored word starts with the given prefix."""
        return self._walk(prefix) is not None

    def _collect_words(self, node, path, results):
        """DFS to collect all complete words below a given node."""
        if node.is_end:
            results.append(path)
        for char, child in node.children.items():
            self._collect_words(child, path + char, results)

    def search(self, prefix):
        """
        Return every stored word beginning with `prefix`.

        Algorithm:
        1. Navigate to the node representing the last char of prefix
        2. DFS from that node to collect all complete words

        The order follows child insertion order; callers should not rely
        on it. An unmatched prefix yields an empty list, and the empty
        prefix yields every stored word.
        """
        node = self._walk(prefix)
        if node is None:
            return []
        results = []
        self._collect_words(node, prefix, results)
        return results

    def __contains__(self, word):
        return isinstance(word, str) and self.contains(word)

    def __len__(self):
        return self._word_count

    def __repr__(self):
        return f'Trie(words={self._word_count})'


# ============================================================================
# 4. GRAPH — Undirected Adjacency-List Graph
# ============================================================================

class UnknownVertexError(LookupError):
    """Raised when an edge or traversal references an unregistered vertex."""

    def __init__(self, vertex):
        super().__init__(f"Unknown vertex: {vertex!r}")
        self.vertex = vertex


class Graph:
    """
    Undirected graph stored as an adjacency list.

    How it works:
    - Maps each vertex to the ordered list of its neighbours
    - add_edge(v, w) appends w to v's list and v to w's list
    - Parallel edges are kept; calling add_edge twice lists the pair twice
    - Vertices are never removed

    Both endpoints of add_edge, and the start of bfs, must already be
    registered; otherwise UnknownVertexError is raised and nothing changes.

    Time Complexity:
    - add_vertex, add_edge: O(1) amortized
    - bfs: O(V + E)
    """

    def __init__(self):
        """Initialize an empty graph."""
        self._adjacency = {}

    def _require(self, vertex):
        if vertex not in self._adjacency:
            raise UnknownVertexError(vertex)

    def add_vertex(self, vertex):
        """Register a vertex with no neighbours. Idempotent."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(self, v, w):
        """Connect two registered vertices."""
        self._require(v)
        self._require(w)
        self._adjacency[v].append(w)
        self._adjacency[w].append(v)

    def add_edge_auto(self, v, w):
        """Connect two vertices, registering whichever are missing first."""
        self.add_vertex(v)
        self.add_vertex(w)
        self.add_edge(v, w)

    def neighbors(self, vertex):
        """Return a copy of the vertex's neighbour list, in insertion order."""
        self._require(vertex)
        return list(self._adjacency[vertex])

    def vertices(self):
        """Return all registered vertices in registration order."""
        return list(self._adjacency)

    def bfs(self, start):
        """
        Breadth-first traversal from `start`.

        Returns:
            list: Every vertex reachable from start, each exactly once,
                  in the order it was first discovered.
        """
        self._require(start)
        visited = {start}
        frontier = Queue()
        frontier.enqueue(start)
        order = []

        while not frontier.is_empty():
            vertex = frontier.dequeue()
            order.append(vertex)
            for neighbor in self._adjacency[vertex]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    frontier.enqueue(neighbor)
        return order

    def __contains__(self, vertex):
        return vertex in self._adjacency

    def __len__(self):
        return len(self._adjacency)

    def __repr__(self):
        edges = sum(len(n) for n in self._adjacency.values()) // 2
        return f'Graph(vertices={len(self._adjacency)}, edges={edges})'
