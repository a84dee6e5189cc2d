# Suggestions ("Most used") panel size
MAX_SUGGESTED_ITEMS = 6

# Reusable blocks get their own tab, never a category panel
RESERVED_CATEGORY = "reusable"

# Panel titles / accessible labels
CHILD_BLOCKS_LABEL = "Child Blocks"
MOST_USED_LABEL = "Most used"
UNCATEGORIZED_LABEL = "Uncategorized"

# Separator between a block's namespace and its local name
NAMESPACE_SEPARATOR = "/"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
