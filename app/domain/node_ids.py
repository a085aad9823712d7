"""Type tags for global ids.

A global id is ``<cuid2 token><type tag>`` (e.g. ``ck1abowner123:user``).
Tags are stable and versionless; once ids are persisted a tag must never change.
No registered tag may be a suffix of another (enforced by NodeRegistry).
"""

USER_TAG = ":user"
USER_TYPE_NAME = "User"
