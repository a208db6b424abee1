"""Catalog of rclone subcommands exposed as methods."""

from __future__ import annotations

COMMANDS: tuple[str, ...] = (
    "about",  # Get quota information from the remote.
    "authorize",  # Remote authorization.
    "backend",  # Run a backend specific command.
    "cat",  # Concatenate any files and send them to stdout.
    "check",  # Check the files in the source and destination match.
    "cleanup",  # Clean up the remote if possible.
    "config",  # Enter an interactive configuration session.
    "config create",  # Create a new remote with name, type and options.
    "config delete",  # Delete an existing remote.
    "config disconnect",  # Disconnect user from remote.
    "config dump",  # Dump the config file as JSON.
    "config edit",  # Enter an interactive configuration session.
    "config file",  # Show path of configuration file in use.
    "config password",  # Update password in an existing remote.
    "config providers",  # List in JSON format all the providers and options.
    "config reconnect",  # Re-authenticate user with remote.
    "config show",  # Print (decrypted) config file, or a single remote.
    "config update",  # Update options in an existing remote.
    "config userinfo",  # Print info about logged in user of remote.
    "copy",  # Copy files from source to dest, skipping already copied.
    "copyto",  # Copy files from source to dest, skipping already copied.
    "copyurl",  # Copy url content to dest.
    "cryptcheck",  # Check the integrity of a crypted remote.
    "cryptdecode",  # Return unencrypted file names.
    "dedupe",  # Interactively find duplicate filenames and delete/rename them.
    "delete",  # Remove the contents of path.
    "deletefile",  # Remove a single file from remote.
    "genautocomplete",  # Output completion script for a given shell.
    "genautocomplete bash",
    "genautocomplete fish",
    "genautocomplete zsh",
    "gendocs",  # Output markdown docs for rclone to the directory supplied.
    "hashsum",  # Produce a hashsum file for all the objects in the path.
    "link",  # Generate public link to file/folder.
    "listremotes",  # List all the remotes in the config file.
    "ls",  # List the objects in the path with size and path.
    "lsd",  # List all directories/containers/buckets in the path.
    "lsf",  # List directories and objects formatted for parsing.
    "lsjson",  # List directories and objects in the path in JSON format.
    "lsl",  # List the objects with modification time, size and path.
    "md5sum",  # Produce an md5sum file for all the objects in the path.
    "mkdir",  # Make the path if it doesn't already exist.
    "mount",  # Mount the remote as file system on a mountpoint.
    "move",  # Move files from source to dest.
    "moveto",  # Move file or directory from source to dest.
    "ncdu",  # Explore a remote with a text based user interface.
    "obscure",  # Obscure password for use in the rclone config file.
    "purge",  # Remove the path and all of its contents.
    "rc",  # Run a command against a running rclone.
    "rcat",  # Copy standard input to file on remote.
    "rcd",  # Run rclone listening to remote control commands only.
    "rmdir",  # Remove the path if empty.
    "rmdirs",  # Remove empty directories under the path.
    "serve",  # Serve a remote over a protocol.
    "serve dlna",
    "serve ftp",
    "serve http",
    "serve restic",
    "serve sftp",
    "serve webdav",
    "settier",  # Change storage class/tier of objects in remote.
    "sha1sum",  # Produce an sha1sum file for all the objects in the path.
    "size",  # Print the total size and number of objects in remote:path.
    "sync",  # Make source and dest identical, modifying destination only.
    "touch",  # Create new file or change file modification time.
    "tree",  # List the contents of the remote in a tree like fashion.
    "version",  # Show the version number.
)


def attribute_name(command: str) -> str:
    """``"config create"`` → ``"config_create"``."""
    return "_".join(command.split())


BY_ATTRIBUTE: dict[str, str] = {attribute_name(c): c for c in COMMANDS}
