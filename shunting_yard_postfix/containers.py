class Stack:
    """
    LIFO buffer with a fixed capacity
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._items = []

    def push(self, item):
        if len(self._items) >= self.capacity:
            raise OverflowError(f"stack is full (capacity {self.capacity})")
        self._items.append(item)

    def pop(self):
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self):
        """
        Top item or None when the stack is empty
        """
        if not self._items:
            return None
        return self._items[-1]

    def size(self):
        return len(self._items)

    def to_list(self):
        # Bottom first
        return list(self._items)

    def __len__(self):
        return self.size()

    def __repr__(self):
        return f"<Stack {self._items.__repr__()}>"


class Queue:
    """
    FIFO buffer with a fixed capacity

    Iterating a queue dequeues every item, so it can be consumed once
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._items = []
        # Index of the next item to dequeue
        self._head = 0

    def enqueue(self, item):
        if self.size() >= self.capacity:
            raise OverflowError(f"queue is full (capacity {self.capacity})")
        self._items.append(item)

    def dequeue(self):
        if self.size() == 0:
            raise IndexError("dequeue from empty queue")
        item = self._items[self._head]
        self._head += 1
        if self._head == len(self._items):
            self._items.clear()
            self._head = 0
        return item

    def peek(self):
        if self.size() == 0:
            return None
        return self._items[self._head]

    def size(self):
        return len(self._items) - self._head

    def to_list(self):
        return self._items[self._head :]

    def __len__(self):
        return self.size()

    def __iter__(self):
        while self.size():
            yield self.dequeue()

    def __repr__(self):
        return f"<Queue {self.to_list().__repr__()}>"
