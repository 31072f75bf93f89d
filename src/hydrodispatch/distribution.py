from collections.abc import Iterator
from dataclasses import dataclass, field

from .flow import Flow


@dataclass(eq=False)
class Distribution:
    """Candidate dispatch: one flow per turbine, locus i bound to turbine i."""

    loci: list[Flow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.loci)

    def __getitem__(self, i: int) -> Flow:
        return self.loci[i]

    def __iter__(self) -> Iterator[Flow]:
        return iter(self.loci)

    @property
    def total_power(self) -> float:
        return sum(locus.power() for locus in self.loci)

    @property
    def total_flow(self) -> float:
        return sum(locus.require_value() for locus in self.loci)

    def values(self) -> list[float | None]:
        return [locus.value for locus in self.loci]

    def set_value(self, i: int, value: float) -> None:
        self.loci[i].value = value

    def set_copy(self, i: int, locus: Flow) -> None:
        self.loci[i] = locus.copy()

    def copy(self) -> "Distribution":
        return type(self)([locus.copy() for locus in self.loci])

    def report(self) -> str:
        lines = []
        for i, locus in enumerate(self.loci):
            lines.append(
                f"Turbine {i}:\t{locus.power():6.2f}\t{locus.require_value():6.2f}"
                f"\t{locus.turbine.efficiency(locus):6.2f}"
            )
        lines.append(f"Total power:\t{self.total_power:6.4f}")
        lines.append(f"Total flow:\t{self.total_flow:6.4f}")
        return "\n".join(lines)
