class InvalidNodeError(ValueError):
    """A node reference the graph does not recognise."""

    def __init__(self, node, role: str = "node"):
        super().__init__(f"Unknown {role} node {node!r}")
        self.node, self.role = node, role
