"""Small character, memory, string, linked-list and output helpers."""