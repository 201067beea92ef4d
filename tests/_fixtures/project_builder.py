"""Helper utilities for constructing temporary React projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class ProjectBuilder:
    """Utility for writing source files into a throwaway application project."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self, relative: str = "") -> Path:
        """Return the project root, or a path inside it."""
        return self.root / relative if relative else self.root


SAMPLE_APP: Mapping[str, str] = {
    "src/components/ui/Button.tsx": """
        import React from 'react';
        import { cva, type VariantProps } from 'class-variance-authority';

        interface ButtonProps {
          /** Visible label */
          label: string;
          variant?: 'primary' | 'ghost';
          onClick?: (event: React.MouseEvent<HTMLButtonElement>) => void;
        }

        /**
         * Primary action button.
         */
        export function Button({ label, variant = 'primary', onClick }: ButtonProps) {
          return <button onClick={onClick}>{label}</button>;
        }
        """,
    "src/components/ui/Button.test.tsx": """
        import { Button } from './Button';

        export function ButtonSpec() {
          return null;
        }
        """,
    "src/components/ui/index.tsx": """
        export { Button } from './Button';
        """,
    "src/components/shared/SectorBadge.tsx": """
        import { SECTOR_LABELS } from '@/types';
        import type { Sector } from '@/types';

        export interface SectorBadgeProps {
          sector: Sector;
        }

        export const SectorBadge = ({ sector }: SectorBadgeProps) => (
          <span>{SECTOR_LABELS[sector]}</span>
        );
        """,
    "src/components/layout/Header.tsx": """
        import { useAuthStore } from '@/store/authStore';

        export default function Header() {
          const user = useAuthStore((state) => state.user);
          return <header>{user?.email}</header>;
        }
        """,
    "src/pages/Dashboard.tsx": """
        import { useState, useEffect } from 'react';

        const Dashboard = () => {
          const [count, setCount] = useState(0);
          useEffect(() => {}, []);
          return <div onClick={() => setCount(count + 1)}>{count}</div>;
        };

        export default Dashboard;
        """,
    "src/App.tsx": """
        import Dashboard from './pages/Dashboard';

        export default function App() {
          return <Dashboard />;
        }
        """,
    "src/store/authStore.ts": """
        import { create } from 'zustand';
        import { persist, createJSONStorage } from 'zustand/middleware';
        import type { User } from '@/types';

        interface AuthState {
          user: User | null;
          isAuthenticated: boolean;
          login: (email: string, password: string) => Promise<boolean>;
          logout: () => void;
        }

        /** Authentication session. */
        export const useAuthStore = create<AuthState>()(
          persist(
            (set) => ({
              user: null,
              isAuthenticated: false,
              login: async (email, password) => {
                set({ user: { id: '1', email }, isAuthenticated: true });
                return true;
              },
              logout: () => set({ user: null, isAuthenticated: false }),
            }),
            {
              name: 'auth-storage',
              storage: createJSONStorage(() => sessionStorage),
              partialize: (state) => ({ user: state.user }),
            }
          )
        );
        """,
    "src/store/counterStore.ts": """
        import { create } from 'zustand';

        export const useCounterStore = create((set, get) => ({
          count: 0,
          step: 1,
          increment: () => set({ count: get().count + get().step }),
          reset: () => set({ count: 0 }),
        }));
        """,
    "src/store/helpers.ts": """
        export const clamp = (value: number) => Math.max(0, value);
        """,
    "src/types/index.ts": """
        /** Business sector of a company. */
        export type Sector = 'tech' | 'finance' | 'health';

        export interface Address {
          street: string;
          city: string;
        }

        export interface Company extends Entity {
          id: string;
          /** Legal name */
          name: string;
          sector: Sector;
          address?: Address;
        }

        interface Entity {
          createdAt: string;
        }

        export enum Role {
          Admin,
          Member,
          Guest = 'guest',
        }

        export type Point = { x: number; y: number };

        export const SECTOR_LABELS: Record<Sector, string> = {
          tech: 'Technologie',
          finance: 'Finance',
          health: 'Santé',
        };

        export const defaultPageSize = 20;
        """,
}


__all__ = ["ProjectBuilder", "SAMPLE_APP"]
