"""Tag records produced by a scan."""


from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Tag:
    """One actionable comment found in a source file.

    Attributes:
        annotation: Token that marked the comment, e.g. "@TODO"
        title: Text following the token on its own line
        description: Continuation lines of the same comment, newline-joined
        source_file: POSIX path relative to the walk root
        line_number: 1-based line of the annotation
    """

    annotation: str
    title: str
    description: str
    source_file: str
    line_number: int

    def is_valid(self) -> bool:
        return bool(self.title.strip())

    def to_dict(self) -> dict[str, str | int]:
        return asdict(self)


@dataclass
class TagDraft:
    """Mutable accumulator for a tag whose comment block is still open."""

    annotation: str
    title: str
    source_file: str
    line_number: int
    description_lines: list[str] = field(default_factory=list)

    def add_description(self, content: str) -> None:
        content = content.strip()
        if content:
            self.description_lines.append(content)

    def finish(self) -> Tag:
        return Tag(
            annotation=self.annotation,
            title=self.title.strip(),
            description="\n".join(self.description_lines).strip(),
            source_file=self.source_file,
            line_number=self.line_number,
        )
