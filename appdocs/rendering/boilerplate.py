"""Authored reference content for the architecture and developer-guide topics.

Nothing here is derived from scanned sources; these tables describe the
application's stack and working conventions.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..models import Language

Row = Tuple[str, ...]

ARCHITECTURE_SUBSECTIONS: Tuple[str, ...] = ("stack", "layout")
STATE_SUBSECTION = "state"
DEVELOPER_SUBSECTIONS: Tuple[str, ...] = ("setup", "conventions", "workflow")

TECH_STACK: Dict[Language, Tuple[Row, ...]] = {
    Language.FR: (
        ("React 18", "Interface utilisateur en composants fonctionnels"),
        ("TypeScript", "Typage statique de l'application"),
        ("Vite", "Serveur de développement et build de production"),
        ("React Router", "Routage côté client (pages, mises en page)"),
        ("Zustand", "Stores d'état, persistance via le middleware persist"),
        ("Tailwind CSS", "Styles utilitaires"),
        ("shadcn/ui + class-variance-authority", "Composants UI de base et variantes"),
        ("lucide-react", "Icônes"),
        ("Vitest", "Tests unitaires des stores et données"),
    ),
    Language.EN: (
        ("React 18", "User interface built from function components"),
        ("TypeScript", "Static typing across the application"),
        ("Vite", "Development server and production build"),
        ("React Router", "Client-side routing (pages, layouts)"),
        ("Zustand", "State stores, persistence through the persist middleware"),
        ("Tailwind CSS", "Utility-first styling"),
        ("shadcn/ui + class-variance-authority", "Base UI components and variants"),
        ("lucide-react", "Icons"),
        ("Vitest", "Unit tests for stores and data"),
    ),
}

DIRECTORY_LAYOUT: Dict[Language, Tuple[Row, ...]] = {
    Language.FR: (
        ("src/components/ui/", "Composants UI génériques (boutons, badges, cartes)"),
        ("src/components/shared/", "Composants métier réutilisés entre pages"),
        ("src/components/layout/", "En-tête, barre latérale, navigation mobile"),
        ("src/layouts/", "Gabarits de pages (authentification, tableau de bord)"),
        ("src/pages/", "Une page par route"),
        ("src/store/", "Stores Zustand"),
        ("src/types/", "Interfaces, alias de types et tables de libellés"),
        ("src/data/", "Données de démonstration"),
        ("src/test/", "Tests Vitest"),
    ),
    Language.EN: (
        ("src/components/ui/", "Generic UI components (buttons, badges, cards)"),
        ("src/components/shared/", "Domain components reused across pages"),
        ("src/components/layout/", "Header, sidebar, mobile navigation"),
        ("src/layouts/", "Page shells (authentication, dashboard)"),
        ("src/pages/", "One page per route"),
        ("src/store/", "Zustand stores"),
        ("src/types/", "Interfaces, type aliases and label tables"),
        ("src/data/", "Mock data fixtures"),
        ("src/test/", "Vitest tests"),
    ),
}

SETUP_COMMANDS: Dict[Language, Tuple[Row, ...]] = {
    Language.FR: (
        ("npm install", "Installer les dépendances"),
        ("npm run dev", "Lancer le serveur de développement"),
        ("npm run build", "Construire la version de production"),
        ("npm run test", "Exécuter les tests Vitest"),
        ("npm run lint", "Vérifier le style du code"),
    ),
    Language.EN: (
        ("npm install", "Install dependencies"),
        ("npm run dev", "Start the development server"),
        ("npm run build", "Build for production"),
        ("npm run test", "Run the Vitest suite"),
        ("npm run lint", "Lint the code base"),
    ),
}

NAMING_CONVENTIONS: Dict[Language, Tuple[Row, ...]] = {
    Language.FR: (
        ("Composant", "PascalCase, un composant par fichier .tsx"),
        ("Props", "Interface <Composant>Props déclarée au-dessus du composant"),
        ("Hook", "Préfixe use suivi d'une majuscule (useAuthStore)"),
        ("Store", "Fichier <nom>Store.ts exportant use<Nom>Store"),
        ("Type", "PascalCase dans src/types/index.ts"),
        ("Constante", "MAJUSCULES_AVEC_UNDERSCORES (SECTOR_LABELS)"),
    ),
    Language.EN: (
        ("Component", "PascalCase, one component per .tsx file"),
        ("Props", "<Component>Props interface declared above the component"),
        ("Hook", "use prefix followed by a capital letter (useAuthStore)"),
        ("Store", "<name>Store.ts file exporting use<Name>Store"),
        ("Type", "PascalCase in src/types/index.ts"),
        ("Constant", "UPPER_SNAKE_CASE (SECTOR_LABELS)"),
    ),
}

WORKFLOW_STEPS: Dict[Language, Tuple[str, ...]] = {
    Language.FR: (
        "Créer le fichier dans le dossier correspondant à sa catégorie (ui, shared, layout, pages).",
        "Déclarer l'interface des props et documenter le composant avec un commentaire /** ... */.",
        "Lire l'état partagé via les hooks de store plutôt que par des props en cascade.",
        "Ajouter les tests Vitest dans src/test/ pour toute logique de store.",
        "Régénérer cette documentation pour vérifier le résultat.",
    ),
    Language.EN: (
        "Create the file in the folder matching its category (ui, shared, layout, pages).",
        "Declare the props interface and document the component with a /** ... */ comment.",
        "Read shared state through store hooks rather than props drilled through the tree.",
        "Add Vitest tests under src/test/ for any store logic.",
        "Regenerate this documentation to check the result.",
    ),
}

INTRODUCTIONS: Dict[Language, Dict[str, str]] = {
    Language.FR: {
        "architecture": (
            "L'application est une SPA React servie par Vite. Les pages sont montées par "
            "React Router à l'intérieur de deux gabarits, et l'état partagé vit dans des "
            "stores Zustand dont certains sont persistés dans le stockage du navigateur."
        ),
        "developer": (
            "Ce guide rassemble les commandes et conventions nécessaires pour contribuer "
            "au code de l'application."
        ),
    },
    Language.EN: {
        "architecture": (
            "The application is a React SPA served by Vite. Pages are mounted by React "
            "Router inside two layout shells, and shared state lives in Zustand stores, "
            "some of which are persisted to browser storage."
        ),
        "developer": (
            "This guide gathers the commands and conventions needed to contribute to the "
            "application code."
        ),
    },
}


__all__ = [
    "ARCHITECTURE_SUBSECTIONS",
    "DEVELOPER_SUBSECTIONS",
    "DIRECTORY_LAYOUT",
    "INTRODUCTIONS",
    "NAMING_CONVENTIONS",
    "SETUP_COMMANDS",
    "STATE_SUBSECTION",
    "TECH_STACK",
    "WORKFLOW_STEPS",
]
