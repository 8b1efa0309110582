"""Repository for album cover metadata."""

from loguru import logger

from songcatalog.core.data.schema import album_covers
from songcatalog.core.data.types import AlbumCover, BaseRepository


class AlbumCoverRepository(BaseRepository[AlbumCover]):
    """Repository for spt_albums_covers.

    Each album has at most one cover row. Height and width are stored as
    given: only their presence is enforced.
    """

    table = album_covers
    record_type = AlbumCover

    def add_cover(self, album_id: str, url: str, height: int, width: int) -> AlbumCover:
        """Add the cover of an album.

        Args:
            album_id: The album ID
            url: Location of the cover image
            height: Pixel height of the image
            width: Pixel width of the image

        Returns:
            The created cover

        Raises:
            ReferentialIntegrityError: If the album does not exist
            UniquenessViolation: If the album already has a cover
            NotNullViolation: If a field is None
        """
        cover = self.create({"album_id": album_id, "url": url, "height": height, "width": width})
        logger.debug(f"Added cover for album {album_id}: {url} ({width}x{height})")
        return cover

    def get_cover(self, album_id: str) -> AlbumCover | None:
        """Get the cover of an album.

        Args:
            album_id: The album ID

        Returns:
            The cover if found, None otherwise
        """
        return self.get_by_id(album_id)

    def replace_cover(self, album_id: str, url: str, height: int, width: int) -> AlbumCover:
        """Replace the cover of an album, adding it when the album has none.

        Args:
            album_id: The album ID
            url: Location of the new cover image
            height: Pixel height of the image
            width: Pixel width of the image

        Returns:
            The stored cover
        """
        updated = self.update(album_id, {"url": url, "height": height, "width": width})
        if updated is not None:
            logger.debug(f"Replaced cover for album {album_id}")
            return updated
        return self.add_cover(album_id, url, height, width)

    def remove_cover(self, album_id: str) -> bool:
        """Remove the cover of an album.

        Args:
            album_id: The album ID

        Returns:
            True if a cover was removed, False otherwise
        """
        return self.delete(album_id)
