"""
Global constants used throughout the project
"""

# Partitioning
DEFAULT_MINIMUM_CELL_SIZE = 64  # side length, in samples, at which regions stop splitting

# Classification of the representative sample of a leaf region
BLACK_THRESHOLD = 255 * 1 // 5  # 51
GREY_THRESHOLD = 255 * 3 // 5  # 153

# Encoding budget
LEAF_COST = 2  # abstract units per leaf, split nodes are free
MAXIMUM_ENCODED_SIZE = 903
MAXIMUM_DETAIL_LOSS = 4  # stalls tolerated by the merge search before giving up

# Glyphs of the textual encoding
GLYPHS = {
    0: ".",  # black
    1: "/",  # grey
    2: "#",  # white
}
OPEN_SPLIT = "("
CLOSE_SPLIT = ")"

# Parsing
MAXIMUM_NESTING = 64  # splits nested inside each other that the parser accepts
