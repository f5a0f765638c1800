"""
Client gallery backend: photographers share photo galleries, clients select and comment.
"""
