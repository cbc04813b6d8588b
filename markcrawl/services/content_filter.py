class ContentFilter:
    """Drop low-information lines from page markdown.

    A line survives when it is blank, is a heading, or holds at least
    `threshold` whitespace-delimited words. Thresholds of 1 or less keep the
    markdown untouched.
    """

    def filter(self, markdown: str, threshold: int) -> str:
        if threshold <= 1:
            return markdown
        kept = [line for line in markdown.split("\n") if self._keep(line, threshold)]
        return "\n".join(kept)

    def _keep(self, line: str, threshold: int) -> bool:
        if line.strip() == "":
            return True
        if line.startswith("#"):
            return True
        return len(line.split()) >= threshold
