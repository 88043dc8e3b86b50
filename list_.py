class Element:
    def __init__(self, data):
        self.data = data
        self.next = None

    def __repr__(self):
        return f"Element({self.data!r})"

def push(head, data):
    new_head = Element(data)
    new_head.next = head
    return new_head

def from_sequence(values):
    """Build a linked list holding `values` in order; returns its head."""
    head = None
    for data in reversed(list(values)):
        head = push(head, data)
    return head

def to_list(head):
    values = []
    iterator = head
    while iterator is not None:
        values.append(iterator.data)
        iterator = iterator.next
    return values

def list_len(head):
    length = 0
    iterator = head
    while iterator is not None:
        length += 1
        iterator = iterator.next
    return length
