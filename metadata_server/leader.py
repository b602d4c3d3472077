from __future__ import annotations

from common.types import Creator, FileAttr, Metadata, Property

NAME_PREFIX = "Marinade Leader"
SYMBOL = "ML"
DESCRIPTION = "Marinade Crew Leader"
IMAGE_URI = "https://aankor.space/leader.jpeg"
IMAGE_MIME = "image/jpeg"

# (address, share) in payout order
CREATORS = (
    ("Ev4PX31e4ALCBUeAxRzdGc8tPygV9sTWyk9bJHSzxu4j", 0),
    ("LncCfW24e9cuekEaUJT3RQcgdASWzE3jhwyJ3QDa6Fn", 100),
)


def leader_metadata(index: int) -> Metadata:
    """
    Build the metadata document for leader `index`.

    Every non-negative index yields the same document apart from the name;
    there is no collection size to check against.
    """
    if index < 0:
        raise ValueError("index must be >= 0")
    return Metadata(
        name=f"{NAME_PREFIX} {index:d}",
        symbol=SYMBOL,
        description=DESCRIPTION,
        image=IMAGE_URI,
        attributes=[],
        properties=Property(
            files=[FileAttr(uri=IMAGE_URI, file_type=IMAGE_MIME, cdn=False)],
            creators=[Creator(address=a, share=s) for a, s in CREATORS],
        ),
    )
