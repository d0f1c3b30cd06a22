"""C-style helpers: characters, memory, output, strings, linked lists, printf and line reading."""