"""rpn/stack.py"""


class SimpleStack:
    """后进先出栈；空栈上pop/peek返回None而不是抛异常"""

    def __init__(self):
        self._items = []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        if not self._items:
            return None
        return self._items.pop()

    def peek(self):
        if not self._items:
            return None
        return self._items[-1]

    def size(self):
        return len(self._items)

    def is_empty(self):
        return len(self._items) == 0

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        contents = ''.join(f"{item}." for item in reversed(self._items))
        return f"top[{contents}]bottom"
