"""
Todo App: API Routes Package
============================

Route Inventory:
    - hello.py:  GET  /          (plain text)
                 GET  /html      (static HTML)
                 GET  /rand      (random number in a query range)
    - todos.py:  POST /json      (todo echo)
    - stubs.py:  GET  /404       (always not found)
                 GET  /500       (literal "500")

Routes stay thin: extract, call, return. Guards and tracing live in the
middleware package, never in a handler.
"""
