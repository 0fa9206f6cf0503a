"""Application Commands."""

from loc8r.application.locations.commands.create_location import CreateLocationCommand
from loc8r.application.locations.commands.delete_location import DeleteLocationCommand
from loc8r.application.locations.commands.update_location import UpdateLocationCommand

__all__ = ["CreateLocationCommand", "DeleteLocationCommand", "UpdateLocationCommand"]
