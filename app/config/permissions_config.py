"""
Permissions and Roles Configuration
This config defines the permission catalog for every resource and the fixed
role -> permission mapping shared by all project-management services.
Used by the resolver provider, the RBAC routes and the export script.
"""

# Resources and the actions that exist on each of them
RESOURCES = {
    "users": {
        "prefix": "USER",
        "actions": ["READ", "CREATE", "UPDATE", "DELETE"],
        "description": "User account management"
    },
    "projects": {
        "prefix": "PRJ",
        "actions": ["READ", "CREATE", "UPDATE", "DELETE", "MANAGE_MEMBERS"],
        "description": "Project management"
    },
    "tasks": {
        "prefix": "TASK",
        "actions": ["READ", "CREATE", "UPDATE", "DELETE", "ASSIGN"],
        "description": "Task management"
    },
    "comments": {
        "prefix": "CMT",
        "actions": ["READ", "CREATE", "UPDATE", "DELETE"],
        "description": "Comments on projects, tasks and other comments"
    },
    "notifications": {
        "prefix": "NOTI",
        "actions": ["READ", "CREATE", "UPDATE", "DELETE"],
        "description": "User notifications"
    }
}

# Descriptions for actions that are not plain CRUD
RESOURCE_SPECIFIC_PERMISSIONS = {
    "projects": {
        "MANAGE_MEMBERS": "Add or remove project members"
    },
    "tasks": {
        "ASSIGN": "Assign or reassign task owners"
    }
}

ROLE_DESCRIPTIONS = {
    "ROLE_ADMIN": "Full administrative access to every resource",
    "ROLE_PROJECT_MANAGER": "Creates and runs projects, assigns tasks",
    "ROLE_DEVELOPER": "Works on tasks and discusses them",
    "ROLE_USER": "Read-only access"
}

ROLE_PERMISSIONS = {
    "ROLE_ADMIN": [
        "USER_READ", "USER_UPDATE", "USER_DELETE", "USER_CREATE",
        "PRJ_READ", "PRJ_UPDATE", "PRJ_DELETE", "PRJ_CREATE", "PRJ_MANAGE_MEMBERS",
        "TASK_READ", "TASK_UPDATE", "TASK_DELETE", "TASK_CREATE", "TASK_ASSIGN",
        "CMT_READ", "CMT_UPDATE", "CMT_DELETE", "CMT_CREATE",
        "NOTI_READ", "NOTI_UPDATE", "NOTI_DELETE", "NOTI_CREATE"
    ],
    "ROLE_PROJECT_MANAGER": [
        "USER_READ", "PRJ_READ", "PRJ_UPDATE", "PRJ_CREATE", "PRJ_MANAGE_MEMBERS",
        "TASK_READ", "TASK_UPDATE", "TASK_CREATE", "TASK_ASSIGN",
        "CMT_READ", "CMT_UPDATE", "CMT_CREATE",
        "NOTI_READ", "NOTI_CREATE"
    ],
    "ROLE_DEVELOPER": [
        "USER_READ", "PRJ_READ", "TASK_READ", "TASK_UPDATE", "TASK_CREATE",
        "CMT_READ", "CMT_UPDATE", "CMT_CREATE", "NOTI_READ"
    ],
    "ROLE_USER": [
        "USER_READ", "PRJ_READ", "TASK_READ", "CMT_READ", "NOTI_READ"
    ]
}


# Generate permission matrix
def get_permission_matrix():
    """
    Returns a dictionary with all permissions and the roles that use them
    Format: {
        "permissions": [
            {"name": "USER_READ", "resource": "users", "action": "READ", "description": "..."},
            ...
        ],
        "roles": [
            {
                "name": "ROLE_USER",
                "description": "...",
                "permissions": ["CMT_READ", "NOTI_READ", ...]
            },
            ...
        ]
    }
    """
    permissions = []
    roles = []

    for resource, resource_config in RESOURCES.items():
        prefix = resource_config["prefix"]

        for action in resource_config["actions"]:
            description = f"{action.capitalize()} {resource}"

            if resource in RESOURCE_SPECIFIC_PERMISSIONS and action in RESOURCE_SPECIFIC_PERMISSIONS[resource]:
                description = RESOURCE_SPECIFIC_PERMISSIONS[resource][action]

            permissions.append({
                "name": f"{prefix}_{action}",
                "resource": resource,
                "action": action,
                "description": description
            })

    for role_name, role_permissions in ROLE_PERMISSIONS.items():
        roles.append({
            "name": role_name,
            "description": ROLE_DESCRIPTIONS.get(role_name, ""),
            "permissions": sorted(set(role_permissions))
        })

    return {
        "permissions": permissions,
        "roles": roles
    }


# Export the matrix for use by routes and scripts
PERMISSION_MATRIX = get_permission_matrix()
