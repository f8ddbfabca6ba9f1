# Status strings shown by the presentation layer.

IN_PROGRESS = "Learning..."
BLOCKED = "Crystallized path blocks the way."
CRYSTALLIZED = "A path crystallizes behind you."
WON = "Exit reached. The maze remembers your path."
SEALED = "The maze has sealed. No route remains."
TRAPPED = "You are sealed inside your own pattern."
